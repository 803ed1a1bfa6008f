"""Accept/reject workflow for hiring requests."""

from __future__ import annotations

import logging

from company_directory.config import NotificationConfig
from company_directory.schemas.request import Decision, DecisionResult, RequestStatus
from company_directory.services.errors import (
    Conflict,
    DirectoryError,
    Forbidden,
    InvalidInput,
    NotFound,
)
from company_directory.stores.ports import NotificationStore, RecordStore, notes_key

logger = logging.getLogger(__name__)

ACCEPTED_TEMPLATE = "your request for {position} has been accepted!"
REJECTED_TEMPLATE = "your request for {position} has been rejected, here is why: {reason}"


def compose_notification(position_name: str, decision: Decision, deny_reason: str | None = None) -> str:
    """
    Build the message sent to the requesting user.

    Examples:
        >>> compose_notification("Backend Engineer", Decision.ACCEPTED)
        'your request for Backend Engineer has been accepted!'
    """
    if decision is Decision.ACCEPTED:
        return ACCEPTED_TEMPLATE.format(position=position_name)
    return REJECTED_TEMPLATE.format(position=position_name, reason=deny_reason)


class RequestModerator:
    """
    Applies a company owner's decision to a pending hiring request.

    The request moves ``pending -> accepted`` or ``pending -> rejected`` and
    the requesting user is notified. The transition is claimed first with a
    conditional update, so of two concurrent decisions on the same request
    only one proceeds and the other gets ``Conflict`` without notifying
    anybody. If the notification cannot be appended the claim is reverted and
    the original error is raised, leaving the request pending.
    """

    def __init__(
        self,
        records: RecordStore,
        notes: NotificationStore,
        config: NotificationConfig | None = None,
    ) -> None:
        """
        Initialize the moderator.

        Args:
            records: Store holding requests, positions and companies
            notes: Store holding per-user notification buckets
            config: Notification settings (uses defaults if not provided)
        """
        self.records = records
        self.notes = notes
        self.config = config or NotificationConfig()

    @staticmethod
    def _validate(decision: Decision | str, deny_reason: str | None) -> tuple[Decision, str | None]:
        try:
            decision = Decision(decision)
        except ValueError as exc:
            raise InvalidInput(f"unknown decision {decision!r}") from exc
        if decision is Decision.REJECTED:
            if deny_reason is None or not deny_reason.strip():
                raise InvalidInput("a deny reason is required to reject a request")
            return decision, deny_reason
        return decision, None

    def decide(
        self,
        request_id: int,
        decision: Decision | str,
        acting_user_id: int,
        deny_reason: str | None = None,
    ) -> DecisionResult:
        """
        Accept or reject a pending request on behalf of the company owner.

        Args:
            request_id: Id of the request to moderate
            decision: "accepted" or "rejected"
            acting_user_id: Id of the authenticated caller
            deny_reason: Required, non-blank reason when rejecting

        Returns:
            DecisionResult with the new status and the message sent

        Raises:
            InvalidInput: Unknown decision, or rejection without a reason
            NotFound: Request, Position or Company missing
            Forbidden: Caller does not own the company
            Conflict: Request already moderated (possibly concurrently)
            NotificationUnavailable: Target user has no notification bucket
            StoreUnavailable: A store failed; StoreTimeout if it timed out
        """
        decision, deny_reason = self._validate(decision, deny_reason)

        request = self.records.find_request(request_id)
        if request is None:
            raise NotFound("Request", request_id)
        position = self.records.find_position(request.position_id)
        if position is None:
            logger.error("Request %s points at missing position %s", request_id, request.position_id)
            raise NotFound("Position", request.position_id)
        company = self.records.find_company_by_id(position.company_id)
        if company is None:
            logger.error("Position %s points at missing company %s", position.id, position.company_id)
            raise NotFound("Company", position.company_id)

        if company.owner_id != acting_user_id:
            raise Forbidden("you do not have access to answer this request")
        if request.status is not RequestStatus.PENDING:
            raise Conflict(f"request has already been {request.status.value}")

        status = RequestStatus(decision.value)
        message = compose_notification(position.name, decision, deny_reason)
        key = notes_key(request.user_id)

        if not self.records.transition_request(
            request_id, RequestStatus.PENDING, status, deny_reason
        ):
            raise Conflict("request was answered by a concurrent decision")

        try:
            if self.config.create_missing_buckets:
                self.notes.ensure_bucket(key)
            self.notes.append(key, message)
        except Exception as exc:
            logger.warning("Notifying user %s failed, reverting request %s", request.user_id, request_id)
            try:
                self.records.transition_request(request_id, status, RequestStatus.PENDING, None)
            except DirectoryError:
                logger.exception(
                    "Could not revert request %s: it is left %s without a notification",
                    request_id,
                    status.value,
                )
                raise exc
            raise

        logger.info("Request %s %s by user %s", request_id, status.value, acting_user_id)
        return DecisionResult(request_id=request_id, status=status, notification=message)
