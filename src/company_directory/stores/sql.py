"""SQLAlchemy implementations of the record and notification stores.

Stores never commit: the caller owns the session and its transaction (the API
layer commits once a whole operation has succeeded). Writes that must not race
are expressed as single conditional statements so the database arbitrates
between concurrent callers.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Table, delete, exists, insert, select, update
from sqlalchemy import exc as sa_exc
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from company_directory.models.company import Company as CompanyModel
from company_directory.models.notification_bucket import NotificationBucket
from company_directory.models.position import Position as PositionModel
from company_directory.models.request import Request as RequestModel
from company_directory.schemas.company import Company, CompanyCreate
from company_directory.schemas.request import Position, Request, RequestStatus
from company_directory.services.errors import (
    Conflict,
    NotFound,
    NotificationUnavailable,
    SlugTaken,
    StoreTimeout,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

_TIMEOUT_MARKERS = ("database is locked", "canceling statement", "timeout", "timed out")


class _SqlStore:
    """Shared session handling and SQLAlchemy error translation."""

    name = "store"

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def _guard(self) -> Iterator[None]:
        """Translate driver failures into store errors, rolling back the session."""
        try:
            yield
        except sa_exc.TimeoutError as exc:
            self.db.rollback()
            logger.error("%s call timed out: %s", self.name, exc)
            raise StoreTimeout(f"{self.name} timed out") from exc
        except sa_exc.IntegrityError as exc:
            self.db.rollback()
            raise Conflict("record violates a uniqueness constraint") from exc
        except sa_exc.OperationalError as exc:
            self.db.rollback()
            message = str(exc.orig).lower()
            if any(marker in message for marker in _TIMEOUT_MARKERS):
                logger.error("%s call timed out: %s", self.name, exc.orig)
                raise StoreTimeout(f"{self.name} timed out") from exc
            logger.error("%s is unavailable: %s", self.name, exc.orig)
            raise StoreUnavailable(f"{self.name} is unavailable") from exc
        except sa_exc.DBAPIError as exc:
            self.db.rollback()
            logger.error("%s is unavailable: %s", self.name, exc.orig)
            raise StoreUnavailable(f"{self.name} is unavailable") from exc

    def _insert_ignoring_conflict(self, table: Table, values: dict[str, Any], column: str):
        """
        Insert a row unless ``column`` already holds the same value.

        Returns the primary key of the new row, or None when the insert was
        skipped because of a conflict on ``column``.
        """
        dialect = self.db.get_bind().dialect.name
        if dialect == "sqlite":
            stmt = sqlite.insert(table).values(**values).on_conflict_do_nothing(
                index_elements=[column]
            )
        elif dialect == "postgresql":
            stmt = postgresql.insert(table).values(**values).on_conflict_do_nothing(
                index_elements=[column]
            )
        else:
            stmt = insert(table).values(**values)
        pk = table.primary_key.columns.values()[0]
        return self.db.execute(stmt.returning(pk)).scalar_one_or_none()


class SqlRecordStore(_SqlStore):
    """RecordStore backed by the companies, positions and requests tables."""

    name = "record store"

    def _company(self, *criteria) -> Company | None:
        stmt = select(CompanyModel).where(*criteria).execution_options(populate_existing=True)
        with self._guard():
            row = self.db.scalars(stmt).first()
        return Company.model_validate(row) if row is not None else None

    def find_company_by_slug(self, slug: str) -> Company | None:
        return self._company(CompanyModel.slug == slug)

    def find_company_by_id(self, company_id: int) -> Company | None:
        return self._company(CompanyModel.id == company_id)

    def find_company_by_email(self, email: str) -> Company | None:
        return self._company(CompanyModel.email == email)

    def find_company_by_phone(self, phone: str) -> Company | None:
        return self._company(CompanyModel.phone == phone)

    def list_companies(self) -> list[Company]:
        stmt = select(CompanyModel).order_by(CompanyModel.id).execution_options(
            populate_existing=True
        )
        with self._guard():
            rows = self.db.scalars(stmt).all()
        return [Company.model_validate(row) for row in rows]

    def insert_company(self, data: CompanyCreate, owner_id: int, slug: str) -> Company:
        values = {**data.model_dump(), "slug": slug, "owner_id": owner_id}
        with self._guard():
            try:
                company_id = self._insert_ignoring_conflict(CompanyModel.__table__, values, "slug")
            except sa_exc.IntegrityError as exc:
                self.db.rollback()
                if "slug" in str(exc.orig):
                    raise SlugTaken(slug) from exc
                raise Conflict("company with this email or phone already exists") from exc
        if company_id is None:
            raise SlugTaken(slug)
        return self.find_company_by_id(company_id)

    def update_company(
        self, company_id: int, patch: dict[str, Any], slug: str | None = None
    ) -> Company:
        table = CompanyModel.__table__
        values = dict(patch)
        stmt = update(table).where(table.c.id == company_id)
        if slug is not None:
            values["slug"] = slug
            other = table.alias("other")
            stmt = stmt.where(~exists().where(other.c.slug == slug, other.c.id != company_id))
        if values:
            with self._guard():
                try:
                    result = self.db.execute(stmt.values(**values))
                except sa_exc.IntegrityError as exc:
                    self.db.rollback()
                    if slug is not None and "slug" in str(exc.orig):
                        raise SlugTaken(slug) from exc
                    raise Conflict("company with this email or phone already exists") from exc
            if result.rowcount == 0:
                if slug is not None and self.find_company_by_id(company_id) is not None:
                    raise SlugTaken(slug)
                raise NotFound("Company", company_id)
        company = self.find_company_by_id(company_id)
        if company is None:
            raise NotFound("Company", company_id)
        return company

    def delete_company(self, company_id: int) -> None:
        companies = CompanyModel.__table__
        positions = PositionModel.__table__
        requests = RequestModel.__table__
        position_ids = select(positions.c.id).where(positions.c.company_id == company_id)
        with self._guard():
            self.db.execute(delete(requests).where(requests.c.position_id.in_(position_ids)))
            self.db.execute(delete(positions).where(positions.c.company_id == company_id))
            result = self.db.execute(delete(companies).where(companies.c.id == company_id))
        if result.rowcount == 0:
            raise NotFound("Company", company_id)

    def find_request(self, request_id: int) -> Request | None:
        stmt = select(RequestModel).where(RequestModel.id == request_id).execution_options(
            populate_existing=True
        )
        with self._guard():
            row = self.db.scalars(stmt).first()
        return Request.model_validate(row) if row is not None else None

    def find_position(self, position_id: int) -> Position | None:
        with self._guard():
            row = self.db.get(PositionModel, position_id)
        return Position.model_validate(row) if row is not None else None

    def transition_request(
        self,
        request_id: int,
        expected: RequestStatus,
        status: RequestStatus,
        deny_reason: str | None = None,
    ) -> bool:
        table = RequestModel.__table__
        stmt = (
            update(table)
            .where(table.c.id == request_id, table.c.status == expected.value)
            .values(status=status.value, deny_reason=deny_reason)
        )
        with self._guard():
            result = self.db.execute(stmt)
        return result.rowcount == 1


class SqlNotificationStore(_SqlStore):
    """NotificationStore backed by the notification_buckets table."""

    name = "notification store"

    def __init__(
        self, db: Session, max_attempts: int = 3, backoff_seconds: float = 0.05
    ) -> None:
        super().__init__(db)
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds

    def _read(self, key: str) -> tuple[list[str], int] | None:
        table = NotificationBucket.__table__
        with self._guard():
            row = self.db.execute(
                select(table.c.messages, table.c.version).where(table.c.key == key)
            ).first()
        if row is None:
            return None
        return list(row.messages or []), row.version

    def get(self, key: str) -> list[str] | None:
        current = self._read(key)
        return current[0] if current is not None else None

    def set(self, key: str, messages: list[str]) -> None:
        table = NotificationBucket.__table__
        with self._guard():
            result = self.db.execute(
                update(table)
                .where(table.c.key == key)
                .values(messages=list(messages), version=table.c.version + 1)
            )
            if result.rowcount == 0:
                self.db.execute(
                    insert(table).values(key=key, messages=list(messages), version=0)
                )

    def append(self, key: str, message: str) -> list[str]:
        table = NotificationBucket.__table__
        for attempt in range(1, self.max_attempts + 1):
            current = self._read(key)
            if current is None:
                raise NotificationUnavailable(key)
            messages, version = current
            updated = [*messages, message]
            with self._guard():
                result = self.db.execute(
                    update(table)
                    .where(table.c.key == key, table.c.version == version)
                    .values(messages=updated, version=version + 1)
                )
            if result.rowcount == 1:
                return updated
            logger.debug("Concurrent write on %s (attempt %d), retrying", key, attempt)
            time.sleep(self.backoff_seconds * attempt)
        raise Conflict(f"could not append to {key} after {self.max_attempts} attempts")

    def ensure_bucket(self, key: str) -> None:
        with self._guard():
            self._insert_ignoring_conflict(
                NotificationBucket.__table__, {"key": key, "messages": [], "version": 0}, "key"
            )
