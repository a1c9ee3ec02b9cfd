from dataclasses import dataclass, field
from typing import Any, Protocol

from httpx import AsyncClient, Response

from .._utils._request_spec import PreparedRequest
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class SessionResponse:
    """What the pipeline needs from a response.

    ``status_code`` is None for responses that carry no HTTP status.
    """

    status_code: int | None
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


class NetworkSession(Protocol):
    """Transport capability used by ``RequestManager``.

    Implementations raise ``httpx.ConnectError`` when there is no
    connectivity and ``httpx.TimeoutException`` when the request times out.
    Any other exception is reported as a transport failure.
    """

    async def send(self, request: PreparedRequest) -> SessionResponse: ...


class HttpxSession:
    """``NetworkSession`` backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client or AsyncClient(**get_httpx_client_kwargs(timeout))

    async def send(self, request: PreparedRequest) -> SessionResponse:
        response: Response = await self._client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
        return SessionResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxSession":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
