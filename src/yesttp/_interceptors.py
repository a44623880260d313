"""Default interceptors and the callable types clients accept.

Interceptors are plain callables stored on the client configuration. They may
be coroutine functions or regular functions; results that are awaitable are
awaited by the client.

Error interceptors are always called with three positional arguments:
``(request, response, cause)``. ``cause`` is the exception raised by the
transport when the request never got a response, and ``None`` otherwise.
"""

from logging import getLogger
from typing import Any, Awaitable, Callable, Optional, Union

from ._utils._request_spec import ResolvedRequest
from ._utils.constants import LOG_PREFIX, LOGGER_NAME
from .models.errors import ResponseError
from .models.response import Response

logger = getLogger(LOGGER_NAME)

RequestInterceptor = Callable[
    [ResolvedRequest], Union[ResolvedRequest, Awaitable[ResolvedRequest]]
]
ResponseSuccessInterceptor = Callable[[ResolvedRequest, Response[Any]], Any]
ResponseErrorInterceptor = Callable[
    [ResolvedRequest, Response[Any], Optional[BaseException]], Any
]


async def default_request_interceptor(request: ResolvedRequest) -> ResolvedRequest:
    return request


async def default_response_success_interceptor(
    request: ResolvedRequest, response: Response[Any]
) -> Response[Any]:
    return response


async def default_response_error_interceptor(
    request: ResolvedRequest,
    response: Response[Any],
    cause: Optional[BaseException] = None,
) -> Any:
    """Log the failed request and raise it as a ``ResponseError``."""
    error = ResponseError(request, response, cause)
    if cause is not None:
        logger.error(f"{LOG_PREFIX} An HTTP error occurred: {error!r}", exc_info=cause)
        raise error from cause
    logger.error(f"{LOG_PREFIX} An HTTP error occurred: {error!r}")
    raise error
