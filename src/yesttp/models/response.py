from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Generic, Optional, TypeVar

from .._utils.constants import LOG_PREFIX, LOGGER_NAME

T = TypeVar("T")

logger = getLogger(LOGGER_NAME)


@dataclass
class Response(Generic[T]):
    """The outcome of one request/response cycle.

    ``body_raw`` holds the response text as read from the transport, or
    ``None`` when nothing could be read. ``body`` is the JSON-decoded value.
    When decoding failed, ``body`` is ``None`` and every access logs a
    warning; ``body_raw`` stays available.

    A ``status`` of ``0`` never comes from a server: it marks a request whose
    transport call raised.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body_raw: Optional[str] = None
    decoded: Optional[T] = field(default=None, repr=False)
    decode_failed: bool = False

    @property
    def body(self) -> Optional[T]:
        if self.decode_failed:
            logger.warning(
                f"{LOG_PREFIX} You're trying to access the response body as JSON, "
                "but it could not be parsed as such"
            )
        return self.decoded

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400

    @classmethod
    def transport_failure(cls) -> "Response[Any]":
        return cls(status=0, headers={}, body_raw=None, decoded=None)
