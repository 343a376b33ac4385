"""
Connections module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class ConnectionRequestNotFoundError(NotFoundError):
    def __init__(self, request_id: str):
        super().__init__(
            f"Connection request not found: {request_id}",
            code="CONNECTION_REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class ConnectionRequestAccessDeniedError(AuthorizationError):
    """Raised when someone other than the receiver answers a request."""

    def __init__(self, request_id: str, user_id: str):
        super().__init__(
            f"Access denied to connection request: {request_id}",
            code="CONNECTION_REQUEST_ACCESS_DENIED",
            details={"request_id": request_id, "user_id": user_id},
        )


class RequestNotPendingError(ConflictError):
    def __init__(self, request_id: str, status: str):
        super().__init__(
            f"Connection request {request_id} is already {status}",
            code="REQUEST_NOT_PENDING",
            details={"request_id": request_id, "status": status},
        )


class AlreadyConnectedError(ConflictError):
    def __init__(self, user_id: str, other_id: str):
        super().__init__(
            "Users are already connected",
            code="ALREADY_CONNECTED",
            details={"user_id": user_id, "other_id": other_id},
        )


class ConnectionsNotAllowedError(AuthorizationError):
    """Raised when the receiver's privacy settings refuse connection requests."""

    def __init__(self, receiver_id: str):
        super().__init__(
            "This user is not accepting connection requests",
            code="CONNECTIONS_NOT_ALLOWED",
            details={"receiver_id": receiver_id},
        )
