from datetime import datetime, timedelta, timezone

import pytest

from petsave import Config, OAuthToken, RequestManager
from petsave._services.auth_manager import auth_token_request
from tests.utils.fake_session import FakeSession


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "PETSAVE_API_SCHEME",
        "PETSAVE_API_HOST",
        "PETSAVE_TOKEN_PATH",
        "PETSAVE_CLIENT_ID",
        "PETSAVE_CLIENT_SECRET",
        "PETSAVE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def host() -> str:
    return "api.example.com"


@pytest.fixture
def base_url(host: str) -> str:
    return f"https://{host}"


@pytest.fixture
def config(host: str) -> Config:
    return Config(
        host=host,
        client_id="test-client-id",
        client_secret="test-client-secret",
    )


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def request_manager(session: FakeSession) -> RequestManager:
    return RequestManager(session)


@pytest.fixture
def token_request(config: Config):
    return auth_token_request(config)


@pytest.fixture
def valid_token() -> OAuthToken:
    return OAuthToken(access_token="cached", token_type="Bearer", expires_in=3600)


@pytest.fixture
def expired_token() -> OAuthToken:
    return OAuthToken(
        access_token="stale",
        token_type="Bearer",
        expires_in=3600,
        requested_at=datetime.now(timezone.utc) - timedelta(hours=2),
    )
