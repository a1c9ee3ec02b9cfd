from typing import Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ResponseDecoder(Protocol[T_co]):
    """Turns a raw response body into a typed value.

    Implementations may raise any exception on malformed input; the request
    pipeline reports it as a ``DecodingError``.
    """

    def decode(self, data: bytes) -> T_co: ...


class JSONResponseDecoder(Generic[T]):
    """Validates a JSON body against a type using pydantic.

    Works for pydantic models as well as plain types such as
    ``list[Animal]`` or ``dict[str, Any]``.
    """

    def __init__(self, type_: Any) -> None:
        self._type = type_
        self._adapter: TypeAdapter[T] = TypeAdapter(type_)

    def decode(self, data: bytes) -> T:
        return self._adapter.validate_json(data)

    def __repr__(self) -> str:
        return f"JSONResponseDecoder({self._type!r})"


class BytesResponseDecoder:
    def decode(self, data: bytes) -> bytes:
        return data


class EmptyResponseDecoder:
    """For endpoints whose body carries nothing of interest (e.g. 204)."""

    def decode(self, data: bytes) -> None:
        return None
