from ._config import ClientConfig
from ._interceptors import (
    RequestInterceptor,
    ResponseErrorInterceptor,
    ResponseSuccessInterceptor,
    default_request_interceptor,
    default_response_error_interceptor,
    default_response_success_interceptor,
)
from ._utils import (
    Credentials,
    HttpMethod,
    RequestSpec,
    ResolvedRequest,
    Transport,
    TransportOptions,
    TransportResponse,
    build_url,
    get_default_transport,
    httpx_transport,
    set_default_transport,
)
from ._yesttp import Yesttp
from .models import ConfigurationError, Response, ResponseError

__all__ = [
    "Yesttp",
    "ClientConfig",
    "ConfigurationError",
    "Credentials",
    "HttpMethod",
    "RequestInterceptor",
    "RequestSpec",
    "ResolvedRequest",
    "Response",
    "ResponseError",
    "ResponseErrorInterceptor",
    "ResponseSuccessInterceptor",
    "Transport",
    "TransportOptions",
    "TransportResponse",
    "build_url",
    "default_request_interceptor",
    "default_response_error_interceptor",
    "default_response_success_interceptor",
    "get_default_transport",
    "httpx_transport",
    "set_default_transport",
]
