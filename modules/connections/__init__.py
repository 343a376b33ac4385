"""
Connections module.

Connection request workflow: send, list, accept and reject.
"""

from .interfaces import IConnectionService
from .models import ConnectionRequest, ConnectionRequestWithSender
from .exceptions import (
    AlreadyConnectedError,
    ConnectionRequestAccessDeniedError,
    ConnectionRequestNotFoundError,
    ConnectionsNotAllowedError,
    RequestNotPendingError,
)

__all__ = [
    "IConnectionService",
    "ConnectionRequest",
    "ConnectionRequestWithSender",
    "AlreadyConnectedError",
    "ConnectionRequestAccessDeniedError",
    "ConnectionRequestNotFoundError",
    "ConnectionsNotAllowedError",
    "RequestNotPendingError",
]
