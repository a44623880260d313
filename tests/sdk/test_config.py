import pydantic
import pytest

from tests.utils.transport import FakeTransport
from yesttp import (
    ClientConfig,
    Yesttp,
    default_request_interceptor,
    default_response_error_interceptor,
    default_response_success_interceptor,
    httpx_transport,
    set_default_transport,
)


class TestClientConfig:
    def test_defaults(self):
        client = Yesttp()

        assert client.config.base_url is None
        assert client.config.credentials is None
        assert client.config.transport is httpx_transport
        assert client.config.request_interceptor is default_request_interceptor
        assert (
            client.config.response_success_interceptor
            is default_response_success_interceptor
        )
        assert (
            client.config.response_error_interceptor
            is default_response_error_interceptor
        )
        assert client.config.debug is False

    def test_config_from_constructor(self, transport: FakeTransport):
        client = Yesttp(
            base_url="https://api.backend.com",
            credentials="include",
            transport=transport,
        )

        assert client.config.base_url == "https://api.backend.com"
        assert client.config.credentials == "include"
        assert client.config.transport is transport

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("YESTTP_BASE_URL", "https://env.backend.com")
        monkeypatch.setenv("YESTTP_CREDENTIALS", "same-origin")

        client = Yesttp()

        assert client.config.base_url == "https://env.backend.com"
        assert client.config.credentials == "same-origin"

    def test_constructor_wins_over_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("YESTTP_BASE_URL", "https://env.backend.com")

        client = Yesttp(base_url="https://api.backend.com")

        assert client.config.base_url == "https://api.backend.com"

    def test_empty_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("YESTTP_CREDENTIALS", "")

        assert Yesttp().config.credentials is None

    def test_invalid_credentials(self):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Yesttp(credentials="always")  # type: ignore[arg-type]

        assert exc_info.value.errors(include_url=False)[0]["loc"] == ("credentials",)

    def test_config_is_immutable(self):
        config = Yesttp().config

        with pytest.raises(pydantic.ValidationError):
            config.base_url = "https://other.com"  # type: ignore[misc]

    def test_missing_transport_is_allowed_at_construction(self):
        set_default_transport(None)

        assert Yesttp().config.transport is None

    def test_client_config_model(self):
        config = ClientConfig(base_url="", credentials="omit")

        assert config.base_url is None
        assert config.credentials == "omit"
