from .auth import AuthToken, OAuthToken
from .errors import (
    ClientError,
    DecodingError,
    EncodingError,
    InvalidUrlError,
    NetworkError,
    NetworkErrorKind,
    NetworkErrorVariant,
    NetworkTimeoutError,
    NoNetworkError,
    RestrictedError,
    ServerError,
    TransportError,
    UncaughtError,
    UnauthenticatedError,
    describe,
)
from .exceptions import BodyEncodingError, CredentialsMissingError

__all__ = [
    "AuthToken",
    "OAuthToken",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkErrorVariant",
    "InvalidUrlError",
    "NetworkTimeoutError",
    "NoNetworkError",
    "TransportError",
    "EncodingError",
    "DecodingError",
    "UnauthenticatedError",
    "RestrictedError",
    "ClientError",
    "ServerError",
    "UncaughtError",
    "describe",
    "BodyEncodingError",
    "CredentialsMissingError",
]
