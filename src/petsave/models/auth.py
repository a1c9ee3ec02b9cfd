"""Authentication token types."""

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@runtime_checkable
class AuthToken(Protocol):
    """What ``AuthManager`` needs from a token."""

    @property
    def token(self) -> str: ...

    @property
    def is_expired(self) -> bool: ...


class OAuthToken(BaseModel):
    """Pydantic model for an OAuth2 token endpoint response.

    ``requested_at`` is stamped when the response is decoded, so the expiry
    is measured from the moment the token was received.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str | None = None
    scope: str | None = None
    requested_at: datetime = Field(default_factory=_utc_now)

    @field_validator("requested_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # naive timestamps (e.g. from older persisted tokens) are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def expires_at(self) -> datetime:
        # an unrepresentable lifetime counts as already expired
        try:
            return self.requested_at + timedelta(seconds=self.expires_in)
        except OverflowError:
            return self.requested_at

    @property
    def is_expired(self) -> bool:
        return _utc_now() >= self.expires_at

    @property
    def token(self) -> str:
        """Full header value, e.g. ``"Bearer sampleAccessToken"``."""
        return f"{self.token_type} {self.access_token}"
