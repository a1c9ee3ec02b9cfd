from ._network_session import HttpxSession, NetworkSession, SessionResponse
from .auth_manager import AuthManager, auth_token_request
from .request_manager import RequestManager, raise_for_status

__all__ = [
    "NetworkSession",
    "HttpxSession",
    "SessionResponse",
    "RequestManager",
    "raise_for_status",
    "AuthManager",
    "auth_token_request",
]
