"""Closed error taxonomy for the request pipeline.

Every failure produced while building, sending or decoding a request is one
of the variants below. The set is closed: subclassing ``NetworkError``
outside this module raises ``TypeError``, and consumers are expected to
``match`` over the variants exhaustively.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Mapping, Union

from httpx import URL, InvalidURL
from typing_extensions import assert_never


class NetworkErrorKind(IntEnum):
    """Stable numeric identifiers, safe to log and to pass across boundaries."""

    INVALID_URL = 7000
    TIMEOUT = 7001
    NO_NETWORK = 7002
    TRANSPORT = 7003
    ENCODING = 7004
    DECODING = 7005
    UNAUTHENTICATED = 7006
    RESTRICTED = 7007
    CLIENT_ERROR = 7008
    SERVER_ERROR = 7009
    UNCAUGHT = 7010


def _same_error(lhs: BaseException, rhs: BaseException) -> bool:
    if lhs is rhs or lhs == rhs:
        return True
    return type(lhs) is type(rhs) and str(lhs) == str(rhs)


def _debug_url(
    scheme: str | None, host: str, path: str, queries: Mapping[str, str]
) -> str:
    result = scheme or ""
    if scheme and not scheme.endswith("://"):
        result += "://"
    if host.startswith("://"):
        host = host[3:]
    result += host
    if result.endswith("/") and path.startswith("/"):
        path = path[1:]
    elif not result.endswith("/") and path and not path.startswith("/"):
        result += "/"
    result += path
    if queries:
        if not path.endswith("?"):
            result += "?"
        result += "&".join(f"{key}={value}" for key, value in queries.items())
    return result


def _body_text(data: bytes | None) -> str:
    if data is None:
        return "No data"
    return data.decode("utf-8", errors="replace")


class NetworkError(Exception):
    """Base of the request pipeline's error variants.

    Attributes:
        kind: The variant's stable ``NetworkErrorKind``.
        url: The resolved request URL the failure relates to.
    """

    kind: ClassVar[NetworkErrorKind]
    url: str

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__name__} cannot extend NetworkError: the variant set is closed"
            )

    def __post_init__(self) -> None:
        super().__init__(describe(self))  # type: ignore[arg-type]

    @property
    def code(self) -> int:
        return int(self.kind)

    @property
    def url_path(self) -> str | None:
        try:
            return URL(self.url).path
        except InvalidURL:
            return None

    @property
    def context(self) -> dict[str, Any]:
        """Diagnostic fields for structured logging."""
        return error_context(self)  # type: ignore[arg-type]

    def _payload_matches(self, other: Any) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        if self.url != other.url:
            return False
        if type(self) is not type(other):
            return False
        return self._payload_matches(other)

    def __hash__(self) -> int:
        return hash((self.kind, self.url))


@dataclass(eq=False)
class InvalidUrlError(NetworkError):
    """The request components could not be combined into a valid URL."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.INVALID_URL
    scheme: str | None
    host: str
    path: str
    queries: Mapping[str, str] = field(default_factory=dict)

    @property  # type: ignore[override]
    def url(self) -> str:
        return _debug_url(self.scheme, self.host, self.path, self.queries)

    def _payload_matches(self, other: "InvalidUrlError") -> bool:
        return dict(self.queries) == dict(other.queries)


@dataclass(eq=False)
class NetworkTimeoutError(NetworkError):
    """The transport exceeded its deadline."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.TIMEOUT
    url: str


@dataclass(eq=False)
class NoNetworkError(NetworkError):
    """The transport could not connect."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.NO_NETWORK
    url: str


@dataclass(eq=False)
class TransportError(NetworkError):
    """Any other failure getting the request to the server or the response back."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.TRANSPORT
    error: BaseException
    url: str

    def _payload_matches(self, other: "TransportError") -> bool:
        return _same_error(self.error, other.error)


@dataclass(eq=False)
class EncodingError(NetworkError):
    """The request body could not be serialized."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.ENCODING
    error: BaseException
    url: str

    def _payload_matches(self, other: "EncodingError") -> bool:
        return _same_error(self.error, other.error)


@dataclass(eq=False)
class DecodingError(NetworkError):
    """The response body could not be decoded into the expected type."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.DECODING
    error: BaseException
    data: bytes | None
    url: str

    def _payload_matches(self, other: "DecodingError") -> bool:
        return _same_error(self.error, other.error) and self.data == other.data


@dataclass(eq=False)
class UnauthenticatedError(NetworkError):
    """HTTP 401."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.UNAUTHENTICATED
    url: str


@dataclass(eq=False)
class RestrictedError(NetworkError):
    """HTTP 403."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.RESTRICTED
    url: str


@dataclass(eq=False)
class ClientError(NetworkError):
    """HTTP 4xx other than 401 and 403."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.CLIENT_ERROR
    status_code: int
    data: bytes
    url: str

    def _payload_matches(self, other: "ClientError") -> bool:
        return self.status_code == other.status_code and self.data == other.data


@dataclass(eq=False)
class ServerError(NetworkError):
    """HTTP 5xx."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.SERVER_ERROR
    status_code: int
    data: bytes
    url: str

    def _payload_matches(self, other: "ServerError") -> bool:
        return self.status_code == other.status_code and self.data == other.data


@dataclass(eq=False)
class UncaughtError(NetworkError):
    """A dependency raised an error of a type the pipeline did not expect."""

    kind: ClassVar[NetworkErrorKind] = NetworkErrorKind.UNCAUGHT
    error: BaseException
    source: str
    expected_type: str
    url: str

    def _payload_matches(self, other: "UncaughtError") -> bool:
        return (
            _same_error(self.error, other.error)
            and self.source == other.source
            and self.expected_type == other.expected_type
        )


NetworkErrorVariant = Union[
    InvalidUrlError,
    NetworkTimeoutError,
    NoNetworkError,
    TransportError,
    EncodingError,
    DecodingError,
    UnauthenticatedError,
    RestrictedError,
    ClientError,
    ServerError,
    UncaughtError,
]


def describe(error: NetworkErrorVariant) -> str:
    """Human readable, deterministic description of a network error."""
    lines = [
        "--- NETWORK ERROR ---",
        f"Originating from request to url: {error.url}",
    ]

    def response_error(code: int, body: str) -> None:
        lines.append(f"Network request resulted in a {code} status code.")
        if body:
            lines.append(f"Backend responded with the message: {body}")

    match error:
        case InvalidUrlError():
            lines.append("Failed to generate a url for")
            lines.append(f"scheme: {error.scheme}")
            lines.append(f"host: {error.host}")
            lines.append(f"path: {error.path}")
            lines.append(f"queries: {dict(error.queries)}")
        case NetworkTimeoutError():
            lines.append("Network request timed out")
        case NoNetworkError():
            lines.append("No network connection")
        case TransportError():
            lines.append(f"Transport error:\n{error.error}")
        case EncodingError():
            lines.append("Encoding failed while adding the body to the request.")
            lines.append(f"Underlying error: {error.error}")
        case DecodingError():
            lines.append("Decoding failed while parsing the response from the backend.")
            lines.append(f"Underlying error: {error.error}")
            lines.append(f"Body: {_body_text(error.data)}")
        case UnauthenticatedError():
            response_error(401, "")
        case RestrictedError():
            response_error(403, "")
        case ClientError() | ServerError():
            response_error(error.status_code, _body_text(error.data))
        case UncaughtError():
            lines.append("Uncaught error.")
            lines.append(f"Source: {error.source}")
            lines.append(f"Expected type: {error.expected_type}")
            lines.append(f"Underlying error:\n{error.error!r}")
        case _:
            assert_never(error)
    return "\n".join(lines)


def error_context(error: NetworkErrorVariant) -> dict[str, Any]:
    """Variant specific diagnostic fields, keyed by name."""
    result: dict[str, Any] = {"url": error.url, "code": error.code}
    match error:
        case (
            InvalidUrlError()
            | NetworkTimeoutError()
            | NoNetworkError()
            | UnauthenticatedError()
            | RestrictedError()
        ):
            pass
        case TransportError():
            result["transport_error"] = error.error
        case EncodingError():
            result["encoding_error"] = error.error
        case DecodingError():
            result["decoding_error"] = error.error
            result["data"] = error.data
        case ClientError() | ServerError():
            result["status_code"] = error.status_code
            result["data"] = error.data
        case UncaughtError():
            result["source"] = error.source
            result["underlying_error"] = error.error
            result["expected_type"] = error.expected_type
        case _:
            assert_never(error)
    return result
