import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/yesttp) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from tests.utils.transport import FakeTransport  # noqa: E402
from yesttp import Yesttp, get_default_transport, set_default_transport  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://api.backend.com"


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> Yesttp:
    return Yesttp(transport=transport)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("YESTTP_BASE_URL", raising=False)
    monkeypatch.delenv("YESTTP_CREDENTIALS", raising=False)


@pytest.fixture(autouse=True)
def restore_default_transport() -> Generator[None, None, None]:
    original = get_default_transport()
    yield
    set_default_transport(original)
