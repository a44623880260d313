from ._logs import setup_logging
from ._request_spec import Credentials, HttpMethod, RequestSpec, ResolvedRequest
from ._transport import (
    HttpxTransportResponse,
    Transport,
    TransportOptions,
    TransportResponse,
    get_default_transport,
    httpx_transport,
    resolve_transport,
    set_default_transport,
)
from ._url import build_url

__all__ = [
    "build_url",
    "setup_logging",
    "Credentials",
    "HttpMethod",
    "RequestSpec",
    "ResolvedRequest",
    "HttpxTransportResponse",
    "Transport",
    "TransportOptions",
    "TransportResponse",
    "get_default_transport",
    "httpx_transport",
    "resolve_transport",
    "set_default_transport",
]
