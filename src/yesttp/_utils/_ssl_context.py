import os
import ssl
from functools import lru_cache
from typing import Any

import certifi


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


@lru_cache(maxsize=1)
def create_ssl_context() -> ssl.SSLContext:
    # Honour the usual CA bundle overrides before falling back to certifi
    ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
    requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
    ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

    return ssl.create_default_context(
        cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
        capath=ssl_cert_dir,
    )


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Keyword arguments for the short-lived clients opened by the httpx transport.

    The SSL context is built once per process and shared by every client.
    """
    return {
        "verify": create_ssl_context(),
        "follow_redirects": True,
    }


def clear_ssl_context_cache() -> None:
    """Drop the cached SSL context so CA bundle env changes are picked up."""
    create_ssl_context.cache_clear()
