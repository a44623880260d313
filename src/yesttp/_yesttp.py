import dataclasses
import inspect
import json
from logging import getLogger
from os import environ as env
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from dotenv import load_dotenv

from ._config import ClientConfig
from ._interceptors import (
    RequestInterceptor,
    ResponseErrorInterceptor,
    ResponseSuccessInterceptor,
)
from ._utils import (
    Credentials,
    RequestSpec,
    ResolvedRequest,
    Transport,
    TransportOptions,
    TransportResponse,
    build_url,
    resolve_transport,
    setup_logging,
)
from ._utils.constants import (
    APPLICATION_JSON,
    ENV_BASE_URL,
    ENV_CREDENTIALS,
    HEADER_CONTENT_TYPE,
    LOGGER_NAME,
)
from .models.errors import ConfigurationError
from .models.response import Response

load_dotenv()

Headers = Mapping[str, Optional[str]]
SearchParams = Mapping[str, Optional[str]]


async def _invoke(func: Callable[..., Any], *args: Any) -> Any:
    result = func(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def _remove_none_values(mapping: Mapping[str, Optional[str]]) -> dict[str, str]:
    return {key: value for key, value in mapping.items() if value is not None}


def _has_header(headers: Headers, name: str) -> bool:
    name = name.lower()
    return any(
        key.lower() == name and value is not None for key, value in headers.items()
    )


def _parse_headers(
    headers: Union[Mapping[str, str], Iterable[tuple[str, str]], None],
) -> dict[str, str]:
    """Collapse transport headers into a plain dict; the last value of a name wins."""
    if headers is None:
        return {}
    multi_items = getattr(headers, "multi_items", None)
    if callable(multi_items):
        pairs = multi_items()
    elif isinstance(headers, Mapping):
        pairs = headers.items()
    else:
        pairs = headers

    result: dict[str, str] = {}
    for key, value in pairs:
        result[key] = value
    return result


class Yesttp:
    """Small async HTTP client with a base URL, JSON bodies and interceptors.

    Every request goes through the same pipeline: the URL is built from the
    base URL and query parameters, headers are cleaned up, the request
    interceptor gets a chance to rewrite the request, the transport sends
    it, and the response is handed to the success or the error interceptor
    depending on its status. Whatever the interceptor returns (or raises) is
    the result of the call.

    With the default interceptors a ``2xx``/``3xx`` call returns a
    ``Response`` and anything else raises ``ResponseError``.

    Examples:
        ```python
        from yesttp import Yesttp

        client = Yesttp(base_url="https://api.backend.com")

        response = await client.post("/users", body={"name": "Ada"})
        print(response.status, response.body)
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        credentials: Optional[Credentials] = None,
        transport: Optional[Transport] = None,
        request_interceptor: Optional[RequestInterceptor] = None,
        response_error_interceptor: Optional[ResponseErrorInterceptor] = None,
        response_success_interceptor: Optional[ResponseSuccessInterceptor] = None,
        debug: bool = False,
    ) -> None:
        """Create a client.

        Args:
            base_url (Optional[str]): Prefix for relative request URLs. Falls back
                to the `YESTTP_BASE_URL` environment variable.
            credentials (Optional[Credentials]): Default credentials policy
                (``"omit"``, ``"same-origin"`` or ``"include"``). Falls back to
                the `YESTTP_CREDENTIALS` environment variable.
            transport (Optional[Transport]): Callable performing the network call.
                Defaults to the process-wide transport, see
                ``yesttp.set_default_transport``.
            request_interceptor (Optional[RequestInterceptor]): Receives the
                resolved request before it is sent and returns the request to send.
            response_error_interceptor (Optional[ResponseErrorInterceptor]):
                Receives failed requests. The default one raises ``ResponseError``.
            response_success_interceptor (Optional[ResponseSuccessInterceptor]):
                Receives successful requests. The default one returns the response.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        interceptors = {
            name: value
            for name, value in (
                ("request_interceptor", request_interceptor),
                ("response_error_interceptor", response_error_interceptor),
                ("response_success_interceptor", response_success_interceptor),
            )
            if value is not None
        }

        self._config = ClientConfig(
            base_url=base_url or env.get(ENV_BASE_URL),
            credentials=credentials or env.get(ENV_CREDENTIALS),  # type: ignore
            transport=resolve_transport(transport),
            debug=debug,
            **interceptors,
        )

        setup_logging(self._config.debug)
        self._logger = getLogger(LOGGER_NAME)

        self._logger.debug("CONFIG:")
        self._logger.debug(f"{self._config.model_dump()}\n")

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def get(
        self,
        url: str,
        *,
        search_params: Optional[SearchParams] = None,
        headers: Optional[Headers] = None,
        credentials: Optional[Credentials] = None,
    ) -> Any:
        """Send a GET request. GET requests carry no body."""
        return await self._make_request(
            RequestSpec(
                url=url,
                method="GET",
                search_params=dict(search_params) if search_params else None,
                headers=dict(headers or {}),
                credentials=credentials,
            )
        )

    async def post(
        self,
        url: str,
        *,
        search_params: Optional[SearchParams] = None,
        headers: Optional[Headers] = None,
        body: Any = None,
        body_raw: Any = None,
        credentials: Optional[Credentials] = None,
    ) -> Any:
        """Send a POST request.

        Args:
            url (str): Path relative to the base URL, or an absolute URL.
            search_params (Optional[SearchParams]): Query parameters; ``None``
                values are skipped.
            headers (Optional[Headers]): Request headers; ``None`` values are skipped.
            body (Any): Value sent as JSON with ``Content-Type: application/json``
                unless another content type is given. Wins over ``body_raw``.
            body_raw (Any): Value handed to the transport as is.
            credentials (Optional[Credentials]): Overrides the client default.

        Returns:
            Any: The result of the response interceptor, a ``Response`` by default.
        """
        return await self._request_with_body(
            "POST", url, search_params, headers, body, body_raw, credentials
        )

    async def put(
        self,
        url: str,
        *,
        search_params: Optional[SearchParams] = None,
        headers: Optional[Headers] = None,
        body: Any = None,
        body_raw: Any = None,
        credentials: Optional[Credentials] = None,
    ) -> Any:
        """Send a PUT request. Accepts the same options as ``post``."""
        return await self._request_with_body(
            "PUT", url, search_params, headers, body, body_raw, credentials
        )

    async def patch(
        self,
        url: str,
        *,
        search_params: Optional[SearchParams] = None,
        headers: Optional[Headers] = None,
        body: Any = None,
        body_raw: Any = None,
        credentials: Optional[Credentials] = None,
    ) -> Any:
        """Send a PATCH request. Accepts the same options as ``post``."""
        return await self._request_with_body(
            "PATCH", url, search_params, headers, body, body_raw, credentials
        )

    async def delete(
        self,
        url: str,
        *,
        search_params: Optional[SearchParams] = None,
        headers: Optional[Headers] = None,
        body: Any = None,
        body_raw: Any = None,
        credentials: Optional[Credentials] = None,
    ) -> Any:
        """Send a DELETE request. Accepts the same options as ``post``."""
        return await self._request_with_body(
            "DELETE", url, search_params, headers, body, body_raw, credentials
        )

    async def _request_with_body(
        self,
        method: str,
        url: str,
        search_params: Optional[SearchParams],
        headers: Optional[Headers],
        body: Any,
        body_raw: Any,
        credentials: Optional[Credentials],
    ) -> Any:
        if body is not None and body_raw is not None:
            self._logger.debug(
                f"Both body and body_raw given for {method} {url}; sending body as JSON"
            )
        return await self._make_request(
            RequestSpec(
                url=url,
                method=method,  # type: ignore
                search_params=dict(search_params) if search_params else None,
                headers=dict(headers or {}),
                body=body,
                body_raw=body_raw,
                credentials=credentials,
            )
        )

    async def _make_request(self, spec: RequestSpec) -> Any:
        transport = self._config.transport
        if transport is None:
            raise ConfigurationError()

        request = await self._resolve_request(spec)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")

        try:
            transport_response = await transport(
                request.url, self._transport_options(request)
            )
        except Exception as e:
            self._logger.debug(f"Transport failed for {request.method} {request.url}: {e!r}")
            return await _invoke(
                self._config.response_error_interceptor,
                request,
                Response.transport_failure(),
                e,
            )

        return await self._handle_response(request, transport_response)

    async def _resolve_request(self, spec: RequestSpec) -> ResolvedRequest:
        headers: dict[str, Optional[str]] = dict(spec.headers or {})
        if spec.has_json_body and not _has_header(headers, HEADER_CONTENT_TYPE):
            headers[HEADER_CONTENT_TYPE] = APPLICATION_JSON

        resolved = dataclasses.replace(
            spec,
            url=build_url(self._config.base_url, spec.url, spec.search_params),
            headers=_remove_none_values(headers),  # type: ignore[arg-type]
            credentials=spec.credentials or self._config.credentials,
        )
        return await _invoke(self._config.request_interceptor, resolved)

    def _transport_options(self, request: ResolvedRequest) -> TransportOptions:
        if request.has_json_body:
            body = json.dumps(request.body, separators=(",", ":"), ensure_ascii=False)
        else:
            body = request.body_raw

        return {
            "method": request.method,
            "headers": _remove_none_values(request.headers or {}),
            "body": body,
            "credentials": request.credentials,
        }

    async def _handle_response(
        self, request: ResolvedRequest, transport_response: TransportResponse
    ) -> Any:
        body_raw: Optional[str] = None
        decoded: Any = None
        decode_failed = False
        try:
            body_raw = await transport_response.text()
            if body_raw is not None:
                decoded = json.loads(body_raw)
        except Exception as e:
            self._logger.debug(f"Response body of {request.url} is not JSON: {e!r}")
            decode_failed = True

        response: Response[Any] = Response(
            status=transport_response.status,
            headers=_parse_headers(getattr(transport_response, "headers", None)),
            body_raw=body_raw,
            decoded=decoded,
            decode_failed=decode_failed,
        )

        self._logger.debug(f"Response: {response.status} {request.method} {request.url}")

        if response.ok:
            return await _invoke(
                self._config.response_success_interceptor, request, response
            )
        return await _invoke(
            self._config.response_error_interceptor, request, response, None
        )
