"""Position, hiring request and moderation Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RequestStatus(str, Enum):
    """Hiring request status enumeration."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Decision(str, Enum):
    """Outcome an owner may apply to a pending request."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Position(BaseModel):
    """Position as seen by the moderation core."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    company_id: int


class Request(BaseModel):
    """Hiring request as seen by the moderation core."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    position_id: int
    status: RequestStatus
    deny_reason: str | None = None


class DecisionCreate(BaseModel):
    """Schema for an owner's decision on a request."""

    decision: Decision
    deny_reason: str | None = None


class DecisionResult(BaseModel):
    """Schema returned once a decision has been applied."""

    request_id: int
    status: RequestStatus
    notification: str
