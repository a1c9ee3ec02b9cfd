import re
from typing import Mapping

from httpx import URL, InvalidURL

from ..models.errors import InvalidUrlError

_SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_LABEL = r"[A-Za-z0-9_](?:[A-Za-z0-9_\-]{0,61}[A-Za-z0-9_])?"
_HOST_PATTERN = re.compile(rf"\[[0-9A-Fa-f:.]+\]|{_LABEL}(?:\.{_LABEL})*\.?")


def build_url(
    scheme: str,
    host: str,
    path: str,
    queries: Mapping[str, str] | None = None,
    port: int | None = None,
) -> str:
    """Combine URL components into a single absolute URL.

    Query values are percent-encoded and appended in mapping order.

    Args:
        scheme: URL scheme, e.g. ``https``.
        host: Host name or bracketed IPv6 address, without scheme or port.
        path: Either empty or starting with ``/``.
        queries: Query parameters.
        port: Optional explicit port.

    Returns:
        str: The absolute URL.

    Raises:
        InvalidUrlError: If the components cannot form a well-formed URL.
    """
    queries = dict(queries or {})

    def invalid() -> InvalidUrlError:
        return InvalidUrlError(scheme=scheme, host=host, path=path, queries=queries)

    if not _SCHEME_PATTERN.fullmatch(scheme or ""):
        raise invalid()
    if not _HOST_PATTERN.fullmatch(host or ""):
        raise invalid()
    if path and not path.startswith("/"):
        raise invalid()
    if port is not None and not 0 <= port <= 65535:
        raise invalid()

    try:
        url = URL(
            scheme=scheme.lower(),
            host=host,
            port=port,
            path=path,
            params=queries or None,
        )
    except (InvalidURL, TypeError, ValueError) as e:
        raise invalid() from e

    return str(url)
