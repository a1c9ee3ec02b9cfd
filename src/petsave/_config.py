from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_HOST,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    DEFAULT_TOKEN_PATH,
)


class Config(BaseModel):
    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    token_path: str = DEFAULT_TOKEN_PATH
    client_id: str | None = None
    client_secret: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    @field_validator("host", mode="before")
    @classmethod
    def validate_host(cls, value: str) -> str:
        # a bare host is expected, e.g. api.petfinder.com
        value = value.strip() if isinstance(value, str) else value
        assert value, "Host must not be empty"
        assert "://" not in value and "/" not in value, "Invalid host"
        return value

    @field_validator("token_path")
    @classmethod
    def validate_token_path(cls, value: str) -> str:
        assert value.startswith("/"), "Token path must start with '/'"
        return value

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        assert value > 0, "Timeout must be positive"
        return value
