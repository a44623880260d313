"""URL construction for outgoing requests."""

import re
from typing import Mapping, Optional
from urllib.parse import quote_plus, urlencode

_ABSOLUTE_URL = re.compile(r"^https?://")


def _form_quote(value, safe="", encoding=None, errors=None) -> str:
    # application/x-www-form-urlencoded keeps "*" and escapes "~"
    quoted = quote_plus(value, safe="*", encoding=encoding, errors=errors)
    return quoted.replace("~", "%7E")


def is_absolute_url(url: str) -> bool:
    return _ABSOLUTE_URL.match(url) is not None


def join_url(base_url: Optional[str], url: str) -> str:
    """Join a base URL and a path with exactly one slash between them.

    Absolute URLs (``http://`` or ``https://``) are returned unchanged and the
    base URL is ignored.

    Examples:
        >>> join_url("https://api.backend.com/", "/users")
        'https://api.backend.com/users'
        >>> join_url("https://api.backend.com", "users")
        'https://api.backend.com/users'
        >>> join_url("https://api.backend.com", "https://example.com/hello")
        'https://example.com/hello'
    """
    if is_absolute_url(url):
        return url

    base = base_url or ""
    if base.endswith("/") and url.startswith("/"):
        return f"{base[:-1]}{url}"
    if not base.endswith("/") and not url.startswith("/"):
        return f"{base}/{url}"
    return f"{base}{url}"


def encode_search_params(search_params: Optional[Mapping[str, Optional[str]]]) -> str:
    """Form-encode query parameters, skipping entries whose value is ``None``.

    Pairs keep the iteration order of ``search_params``.
    """
    if not search_params:
        return ""
    return urlencode(
        [(key, value) for key, value in search_params.items() if value is not None],
        quote_via=_form_quote,
    )


def build_url(
    base_url: Optional[str],
    url: str,
    search_params: Optional[Mapping[str, Optional[str]]] = None,
) -> str:
    """Build the complete request URL.

    Args:
        base_url: Instance base URL, ignored when ``url`` is absolute.
        url: Path relative to ``base_url`` or an absolute URL.
        search_params: Query parameters; ``None`` values are dropped.

    Returns:
        str: The joined URL, with ``?<query>`` appended when any parameter remains.
    """
    complete_url = join_url(base_url, url)
    query = encode_search_params(search_params)
    if query:
        complete_url += f"?{query}"
    return complete_url
