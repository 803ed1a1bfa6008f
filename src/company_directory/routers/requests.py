"""Requests API router - owner decisions on hiring requests."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from company_directory.config import notification_config
from company_directory.database import get_db
from company_directory.dependencies import get_current_user_id
from company_directory.schemas.request import DecisionCreate, DecisionResult
from company_directory.services.request_moderator import RequestModerator
from company_directory.stores.sql import SqlNotificationStore, SqlRecordStore

router = APIRouter()


@router.post("/requests/{request_id}/decision", response_model=DecisionResult)
def decide_request(
    request_id: int,
    body: DecisionCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DecisionResult:
    """
    Accept or reject a pending hiring request.

    The status change and the notification to the candidate are committed
    together.

    Raises:
        422: If rejecting without a deny reason.
        404: If the request (or its position/company) does not exist.
        403: If the caller does not own the company.
        409: If the request was already answered.
        503: If the candidate's notification bucket is missing.
    """
    moderator = RequestModerator(
        SqlRecordStore(db),
        SqlNotificationStore(
            db,
            max_attempts=notification_config.append_max_attempts,
            backoff_seconds=notification_config.append_backoff_seconds,
        ),
        config=notification_config,
    )
    result = moderator.decide(request_id, body.decision, user_id, body.deny_reason)
    db.commit()
    return result
