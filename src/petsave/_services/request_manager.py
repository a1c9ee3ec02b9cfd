from logging import getLogger
from typing import TypeVar

from httpx import ConnectError, TimeoutException

from .._utils._request_spec import PreparedRequest, RequestSpec, prepare_request
from .._utils.constants import DEFAULT_SCHEME, LOGGER_NAME
from ..models.errors import (
    ClientError,
    DecodingError,
    NetworkTimeoutError,
    NoNetworkError,
    RestrictedError,
    ServerError,
    TransportError,
    UnauthenticatedError,
)
from ._network_session import HttpxSession, NetworkSession, SessionResponse

T = TypeVar("T")


def raise_for_status(status_code: int | None, data: bytes, url: str) -> None:
    """Classify an HTTP status into the error taxonomy.

    A missing status is not evidence of failure and passes through, as do
    1xx, 2xx, 3xx and anything outside the HTTP ranges.

    Raises:
        UnauthenticatedError: On 401.
        RestrictedError: On 403.
        ClientError: On any other 4xx.
        ServerError: On 5xx.
    """
    if status_code is None:
        return
    if status_code == 401:
        raise UnauthenticatedError(url=url)
    if status_code == 403:
        raise RestrictedError(url=url)
    if 400 <= status_code <= 499:
        raise ClientError(status_code=status_code, data=data, url=url)
    if 500 <= status_code <= 599:
        raise ServerError(status_code=status_code, data=data, url=url)


class RequestManager:
    """Builds, sends and decodes requests described by ``RequestSpec``.

    Stateless per call: each ``load`` is exactly one transport round trip.
    There are no retries; callers wanting them re-invoke ``load``.
    """

    def __init__(
        self,
        session: NetworkSession | None = None,
        *,
        default_scheme: str = DEFAULT_SCHEME,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._owns_session = session is None
        self._session: NetworkSession = session or HttpxSession()
        self._default_scheme = default_scheme

    @property
    def session(self) -> NetworkSession:
        return self._session

    async def aclose(self) -> None:
        """Close the session, if this manager created it."""
        if self._owns_session and isinstance(self._session, HttpxSession):
            await self._session.aclose()

    async def load(self, request: RequestSpec[T], auth_token: str | None = None) -> T:
        """Send a request and decode its response.

        Args:
            request: The request description.
            auth_token: Full ``Authorization`` header value, if any.

        Returns:
            T: The body decoded by ``request.decoder``.

        Raises:
            NetworkError: One of its variants; nothing else crosses this call.
        """
        prepared = prepare_request(
            request, auth_token, default_scheme=self._default_scheme
        )
        data = await self._kick_off(prepared)

        try:
            return request.decoder.decode(data)
        except Exception as e:
            self._logger.debug(f"Decoding failed for {prepared.url}: {e}")
            raise DecodingError(error=e, data=data, url=prepared.url) from e

    async def _kick_off(self, request: PreparedRequest) -> bytes:
        self._logger.debug(f"Request: {request.method} {request.url}")

        url = request.url
        try:
            response: SessionResponse = await self._session.send(request)
        except ConnectError as e:
            raise NoNetworkError(url=url) from e
        except TimeoutException as e:
            raise NetworkTimeoutError(url=url) from e
        except Exception as e:
            raise TransportError(error=e, url=url) from e

        self._logger.debug(f"Response: {response.status_code} {request.method} {url}")
        raise_for_status(response.status_code, response.content, url)
        return response.content
