"""In-memory store implementations.

Used by the test suite and for local experiments. Each store guards its state
with a lock so the conditional and atomic operations behave like their
database counterparts under concurrent callers.
"""

from __future__ import annotations

import threading
from datetime import datetime
from itertools import count
from typing import Any

from company_directory.schemas.company import Company, CompanyCreate
from company_directory.schemas.request import Position, Request, RequestStatus
from company_directory.services.errors import (
    Conflict,
    NotFound,
    NotificationUnavailable,
    SlugTaken,
)


class InMemoryRecordStore:
    """RecordStore holding companies, positions and requests in dictionaries."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = count(1)
        self.companies: dict[int, Company] = {}
        self.positions: dict[int, Position] = {}
        self.requests: dict[int, Request] = {}

    # Seeding helpers (positions and requests are created outside the core)

    def add_company(self, company: Company) -> Company:
        with self._lock:
            self.companies[company.id] = company
        return company

    def add_position(self, position: Position) -> Position:
        with self._lock:
            self.positions[position.id] = position
        return position

    def add_request(self, request: Request) -> Request:
        with self._lock:
            self.requests[request.id] = request
        return request

    # RecordStore

    def _find_company(self, field: str, value: Any) -> Company | None:
        with self._lock:
            return next(
                (c for c in self.companies.values() if getattr(c, field) == value), None
            )

    def find_company_by_slug(self, slug: str) -> Company | None:
        return self._find_company("slug", slug)

    def find_company_by_id(self, company_id: int) -> Company | None:
        with self._lock:
            return self.companies.get(company_id)

    def find_company_by_email(self, email: str) -> Company | None:
        return self._find_company("email", email)

    def find_company_by_phone(self, phone: str) -> Company | None:
        return self._find_company("phone", phone)

    def list_companies(self) -> list[Company]:
        with self._lock:
            return [self.companies[k] for k in sorted(self.companies)]

    def _check_unique(self, company_id: int | None, values: dict[str, Any]) -> None:
        for other in self.companies.values():
            if other.id == company_id:
                continue
            if "slug" in values and other.slug == values["slug"]:
                raise SlugTaken(values["slug"])
            if "email" in values and other.email == values["email"]:
                raise Conflict("company with this email or phone already exists")
            if "phone" in values and other.phone == values["phone"]:
                raise Conflict("company with this email or phone already exists")

    def insert_company(self, data: CompanyCreate, owner_id: int, slug: str) -> Company:
        values = {**data.model_dump(), "slug": slug, "owner_id": owner_id}
        with self._lock:
            self._check_unique(None, values)
            company_id = next(self._ids)
            while company_id in self.companies:
                company_id = next(self._ids)
            company = Company(id=company_id, created_at=datetime.now(), **values)
            self.companies[company_id] = company
        return company

    def update_company(
        self, company_id: int, patch: dict[str, Any], slug: str | None = None
    ) -> Company:
        values = dict(patch)
        if slug is not None:
            values["slug"] = slug
        with self._lock:
            current = self.companies.get(company_id)
            if current is None:
                raise NotFound("Company", company_id)
            self._check_unique(company_id, values)
            updated = current.model_copy(update=values)
            self.companies[company_id] = updated
        return updated

    def delete_company(self, company_id: int) -> None:
        with self._lock:
            if self.companies.pop(company_id, None) is None:
                raise NotFound("Company", company_id)
            doomed = {p.id for p in self.positions.values() if p.company_id == company_id}
            for position_id in doomed:
                del self.positions[position_id]
            for request_id in [r.id for r in self.requests.values() if r.position_id in doomed]:
                del self.requests[request_id]

    def find_request(self, request_id: int) -> Request | None:
        with self._lock:
            return self.requests.get(request_id)

    def find_position(self, position_id: int) -> Position | None:
        with self._lock:
            return self.positions.get(position_id)

    def transition_request(
        self,
        request_id: int,
        expected: RequestStatus,
        status: RequestStatus,
        deny_reason: str | None = None,
    ) -> bool:
        with self._lock:
            current = self.requests.get(request_id)
            if current is None or current.status != expected:
                return False
            self.requests[request_id] = current.model_copy(
                update={"status": status, "deny_reason": deny_reason}
            )
        return True


class InMemoryNotificationStore:
    """NotificationStore keeping each bucket as a Python list."""

    def __init__(self, buckets: dict[str, list[str]] | None = None) -> None:
        self._lock = threading.Lock()
        self.buckets: dict[str, list[str]] = {k: list(v) for k, v in (buckets or {}).items()}

    def get(self, key: str) -> list[str] | None:
        with self._lock:
            messages = self.buckets.get(key)
            return list(messages) if messages is not None else None

    def set(self, key: str, messages: list[str]) -> None:
        with self._lock:
            self.buckets[key] = list(messages)

    def append(self, key: str, message: str) -> list[str]:
        with self._lock:
            messages = self.buckets.get(key)
            if messages is None:
                raise NotificationUnavailable(key)
            messages.append(message)
            return list(messages)

    def ensure_bucket(self, key: str) -> None:
        with self._lock:
            self.buckets.setdefault(key, [])
