"""Store interfaces consumed by the directory core.

Both stores are externally owned and shared with other callers; the core only
relies on the conditional and atomic operations declared here.
"""

from __future__ import annotations

from typing import Any, Protocol

from company_directory.schemas.company import Company, CompanyCreate
from company_directory.schemas.request import Position, Request, RequestStatus


def notes_key(user_id: int) -> str:
    """Return the notification bucket key for a user."""
    return f"user:{user_id}:notes"


class RecordStore(Protocol):
    def find_company_by_slug(self, slug: str) -> Company | None: ...

    def find_company_by_id(self, company_id: int) -> Company | None: ...

    def find_company_by_email(self, email: str) -> Company | None: ...

    def find_company_by_phone(self, phone: str) -> Company | None: ...

    def list_companies(self) -> list[Company]: ...

    def insert_company(self, data: CompanyCreate, owner_id: int, slug: str) -> Company:
        """Insert a company under ``slug``; raise SlugTaken if the slug is in use."""
        ...

    def update_company(
        self, company_id: int, patch: dict[str, Any], slug: str | None = None
    ) -> Company:
        """Apply ``patch`` (and ``slug`` when given); raise SlugTaken if another company holds it."""
        ...

    def delete_company(self, company_id: int) -> None: ...

    def find_request(self, request_id: int) -> Request | None: ...

    def find_position(self, position_id: int) -> Position | None: ...

    def transition_request(
        self,
        request_id: int,
        expected: RequestStatus,
        status: RequestStatus,
        deny_reason: str | None = None,
    ) -> bool:
        """Set status/deny_reason only if the request is still ``expected``."""
        ...


class NotificationStore(Protocol):
    def get(self, key: str) -> list[str] | None: ...

    def set(self, key: str, messages: list[str]) -> None: ...

    def append(self, key: str, message: str) -> list[str]:
        """Atomically append ``message``; raise NotificationUnavailable if the bucket is missing."""
        ...

    def ensure_bucket(self, key: str) -> None:
        """Create an empty bucket for ``key`` if none exists."""
        ...
