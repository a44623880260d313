from dataclasses import dataclass, field
from typing import Any, Literal, Optional

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
Credentials = Literal["omit", "same-origin", "include"]


@dataclass
class RequestSpec:
    """Describes a single HTTP request as it moves through the client.

    Before normalization ``url`` holds the caller's path (or absolute URL) and
    ``search_params`` are still separate. After normalization ``url`` is the
    complete URL including the query string, ``headers`` contain no ``None``
    values and ``credentials`` is resolved against the client default. The
    normalized spec is what request interceptors receive and what is handed
    to the transport.

    ``body`` is JSON-encoded before sending and takes precedence over
    ``body_raw``, which is passed to the transport untouched.
    """

    url: str
    method: HttpMethod
    search_params: Optional[dict[str, Optional[str]]] = None
    headers: dict[str, Optional[str]] = field(default_factory=dict)
    body: Any | None = None
    body_raw: Any | None = None
    credentials: Optional[Credentials] = None

    @property
    def has_json_body(self) -> bool:
        return self.body is not None


# A request after URL construction, header cleanup and the request interceptor.
ResolvedRequest = RequestSpec
