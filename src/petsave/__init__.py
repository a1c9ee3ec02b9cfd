"""Async HTTP client layer for the PetSave backend."""

from ._config import Config
from ._petsave_client import PetSaveClient
from ._services import (
    AuthManager,
    HttpxSession,
    NetworkSession,
    RequestManager,
    SessionResponse,
    auth_token_request,
)
from ._utils import (
    BytesResponseDecoder,
    Coalescer,
    EmptyResponseDecoder,
    FormBody,
    JSONBody,
    JSONResponseDecoder,
    PreparedRequest,
    RawBody,
    RequestMethod,
    RequestSpec,
    ResponseDecoder,
)
from .models import (
    AuthToken,
    BodyEncodingError,
    ClientError,
    CredentialsMissingError,
    DecodingError,
    EncodingError,
    InvalidUrlError,
    NetworkError,
    NetworkErrorKind,
    NetworkTimeoutError,
    NoNetworkError,
    OAuthToken,
    RestrictedError,
    ServerError,
    TransportError,
    UncaughtError,
    UnauthenticatedError,
)

__all__ = [
    "PetSaveClient",
    "Config",
    "RequestManager",
    "AuthManager",
    "auth_token_request",
    "NetworkSession",
    "HttpxSession",
    "SessionResponse",
    "Coalescer",
    "RequestSpec",
    "RequestMethod",
    "PreparedRequest",
    "JSONBody",
    "FormBody",
    "RawBody",
    "ResponseDecoder",
    "JSONResponseDecoder",
    "BytesResponseDecoder",
    "EmptyResponseDecoder",
    "AuthToken",
    "OAuthToken",
    "NetworkError",
    "NetworkErrorKind",
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
    "BodyEncodingError",
    "CredentialsMissingError",
]
