"""
Connections module data models.

A connection request is a ``connection_request`` notification addressed to
the receiver; its ``status`` tracks the request lifecycle.
"""

from pydantic import BaseModel, Field

from modules.notifications.models import Notification, NotificationWithSender
from modules.profiles.models import ProfileSummary

ConnectionRequest = Notification
ConnectionRequestWithSender = NotificationWithSender


class SendConnectionRequest(BaseModel):
    receiver_id: str = Field(..., min_length=1, description="User to connect with")


class ReceivedRequestsResponse(BaseModel):
    requests: list[ConnectionRequestWithSender]


class SentRequestsResponse(BaseModel):
    requests: list[ConnectionRequest]


class ConnectionListResponse(BaseModel):
    connections: list[ProfileSummary]
