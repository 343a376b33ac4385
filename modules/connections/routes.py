"""
Connection API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_connection_service
from shared.models import AuthenticatedUser

from .interfaces import IConnectionService
from .models import (
    ConnectionListResponse,
    ConnectionRequest,
    ReceivedRequestsResponse,
    SendConnectionRequest,
    SentRequestsResponse,
)
from .exceptions import ConnectionRequestAccessDeniedError, ConnectionRequestNotFoundError

router = APIRouter()


@router.get("", response_model=ConnectionListResponse)
async def list_connections(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ConnectionListResponse:
    return ConnectionListResponse(connections=await service.list_connections(user.id))


@router.post("/requests", response_model=ConnectionRequest, status_code=201)
async def send_request(
    request: SendConnectionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ConnectionRequest:
    return await service.send_request(user.id, request.receiver_id)


@router.get("/requests/received", response_model=ReceivedRequestsResponse)
async def list_received(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ReceivedRequestsResponse:
    return ReceivedRequestsResponse(requests=await service.list_received(user.id))


@router.get("/requests/sent", response_model=SentRequestsResponse)
async def list_sent(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> SentRequestsResponse:
    return SentRequestsResponse(requests=await service.list_sent(user.id))


@router.post("/requests/{request_id}/accept", status_code=204)
async def accept_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> None:
    try:
        await service.accept_request(request_id, user.id)
    except (ConnectionRequestNotFoundError, ConnectionRequestAccessDeniedError):
        raise HTTPException(status_code=404, detail="Connection request not found")


@router.post("/requests/{request_id}/reject", status_code=204)
async def reject_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> None:
    try:
        await service.reject_request(request_id, user.id)
    except (ConnectionRequestNotFoundError, ConnectionRequestAccessDeniedError):
        raise HTTPException(status_code=404, detail="Connection request not found")
