from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ._interceptors import (
    default_request_interceptor,
    default_response_error_interceptor,
    default_response_success_interceptor,
)
from ._utils._request_spec import Credentials


class ClientConfig(BaseModel):
    """Immutable configuration of a ``Yesttp`` client.

    ``transport`` is resolved once when the client is built and may be
    ``None``, in which case every request fails with ``ConfigurationError``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: Optional[str] = None
    credentials: Optional[Credentials] = None
    transport: Optional[Callable[..., Any]] = None
    request_interceptor: Callable[..., Any] = default_request_interceptor
    response_success_interceptor: Callable[..., Any] = (
        default_response_success_interceptor
    )
    response_error_interceptor: Callable[..., Any] = default_response_error_interceptor
    debug: bool = False

    @field_validator("base_url", "credentials", mode="before")
    @classmethod
    def empty_as_none(cls, value: Any) -> Any:
        # unset environment variables come through as empty strings
        if value == "":
            return None
        return value
