"""Transport abstraction used by the client to perform the network call.

A transport is an async callable ``transport(url, options)`` returning an
object with ``status``, ``headers`` and an awaitable ``text()``. The client
never talks to the network itself, so any callable with that shape (a test
double, a wrapper around another HTTP library) can be injected.
"""

from logging import getLogger
from typing import (
    Any,
    Awaitable,
    Callable,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    TypedDict,
    Union,
)

import httpx

from ._ssl_context import get_httpx_client_kwargs
from .constants import LOGGER_NAME

logger = getLogger(LOGGER_NAME)


class TransportOptions(TypedDict):
    method: str
    headers: dict[str, str]
    body: Any
    credentials: Optional[str]


class TransportResponse(Protocol):
    status: int
    headers: Union[Mapping[str, str], Iterable[tuple[str, str]]]

    async def text(self) -> str: ...


Transport = Callable[[str, TransportOptions], Awaitable[TransportResponse]]


class HttpxTransportResponse:
    """Adapts an ``httpx.Response`` to the transport response shape."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> list[tuple[str, str]]:
        return self._response.headers.multi_items()

    async def text(self) -> str:
        return self._response.text


async def httpx_transport(url: str, options: TransportOptions) -> HttpxTransportResponse:
    """Send a request with a short-lived ``httpx.AsyncClient``.

    httpx has no notion of a credentials policy, so ``options["credentials"]``
    is only logged.
    """
    logger.debug(
        f"httpx transport: {options['method']} {url} "
        f"(credentials={options.get('credentials')})"
    )
    async with httpx.AsyncClient(**get_httpx_client_kwargs()) as client:
        response = await client.request(
            options["method"],
            url,
            headers=options["headers"],
            content=options["body"],
        )
    return HttpxTransportResponse(response)


_default_transport: Optional[Transport] = httpx_transport


def get_default_transport() -> Optional[Transport]:
    """Return the process-wide transport used when a client is given none."""
    return _default_transport


def set_default_transport(transport: Optional[Transport]) -> None:
    """Replace the process-wide default transport.

    Only clients constructed afterwards pick up the change. Passing ``None``
    leaves new clients without a transport, and their requests raise
    ``ConfigurationError``.
    """
    global _default_transport
    _default_transport = transport


def resolve_transport(transport: Optional[Transport] = None) -> Optional[Transport]:
    """Pick the transport for a new client: the explicit one, else the default."""
    if transport is not None:
        return transport
    return get_default_transport()
