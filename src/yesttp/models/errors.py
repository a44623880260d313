from typing import Any, Optional

from .._utils._request_spec import ResolvedRequest
from .._utils.constants import LOG_PREFIX
from .response import Response


class ConfigurationError(Exception):
    """Raised when the client cannot perform requests at all.

    This signals a misconfigured client rather than a failed request, so it is
    never routed through the response interceptors.
    """

    def __init__(
        self,
        message=f"{LOG_PREFIX} No transport available. Pass `transport=` to the client or register one with `yesttp.set_default_transport()`.",
    ):
        self.message = message
        super().__init__(self.message)


class ResponseError(Exception):
    """An HTTP request that did not succeed.

    Pairs the resolved request with the response. For transport failures the
    response has status ``0`` and no body, and ``cause`` holds the exception
    raised by the transport.
    """

    def __init__(
        self,
        request: ResolvedRequest,
        response: Response[Any],
        cause: Optional[BaseException] = None,
    ) -> None:
        self.request = request
        self.response = response
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"{self.request.method} {self.request.url} failed with status {self.response.status}"
        if self.cause is not None:
            message += f": {self.cause!r}"
        return message

    @property
    def status(self) -> int:
        return self.response.status
