"""Company registration, lookup, update and deletion."""

from __future__ import annotations

import logging

from company_directory.schemas.company import Company, CompanyCreate, CompanyUpdate
from company_directory.services.errors import Conflict, Forbidden, NotFound
from company_directory.services.slug_allocator import SlugAllocator
from company_directory.stores.ports import RecordStore

logger = logging.getLogger(__name__)

NULLABLE_FIELDS: frozenset[str] = frozenset({"address", "description"})


class CompanyService:
    """
    Service for the company lifecycle.

    Handles:
    - Registration with e-mail/phone uniqueness and slug allocation
    - Lookup by slug and full listing
    - Owner-only updates (renames re-allocate the slug)
    - Owner-only deletion
    """

    def __init__(self, records: RecordStore, allocator: SlugAllocator | None = None) -> None:
        """
        Initialize the company service.

        Args:
            records: Record store holding companies
            allocator: Slug allocator (built on ``records`` if not provided)
        """
        self.records = records
        self.allocator = allocator or SlugAllocator(records)

    def _check_contacts(self, email: str | None, phone: str | None, company_id: int | None = None):
        if email is not None:
            holder = self.records.find_company_by_email(email)
            if holder is not None and holder.id != company_id:
                raise Conflict("company with this email already exists")
        if phone is not None:
            holder = self.records.find_company_by_phone(phone)
            if holder is not None and holder.id != company_id:
                raise Conflict("company with this phone already exists")

    def _owned(self, slug: str, user_id: int) -> Company:
        company = self.get(slug)
        if company.owner_id != user_id:
            raise Forbidden("you are not the owner")
        return company

    def register(self, data: CompanyCreate, owner_id: int) -> Company:
        """
        Register a new company owned by ``owner_id``.

        Raises:
            Conflict: If the e-mail or phone is already used by a company
            InvalidInput: If no slug can be built from the name
        """
        self._check_contacts(data.email, data.phone)
        company = self.allocator.claim(
            data.name, lambda slug: self.records.insert_company(data, owner_id, slug)
        )
        logger.info("Registered company %s (id=%s) for owner %s", company.slug, company.id, owner_id)
        return company

    def get(self, slug: str) -> Company:
        """Return the company with ``slug``, or raise NotFound."""
        company = self.records.find_company_by_slug(slug)
        if company is None:
            raise NotFound("Company", slug)
        return company

    def list_all(self) -> list[Company]:
        """Return every company ordered by id."""
        return self.records.list_companies()

    def update(self, slug: str, data: CompanyUpdate, user_id: int) -> Company:
        """
        Apply a partial update to a company the user owns.

        The slug is re-allocated only when the name actually changes.

        Raises:
            NotFound: If no company has ``slug``
            Forbidden: If ``user_id`` is not the owner
            Conflict: If the new e-mail or phone belongs to another company
        """
        company = self._owned(slug, user_id)
        # Only address and description may be cleared with an explicit null
        patch = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        self._check_contacts(patch.get("email"), patch.get("phone"), company.id)

        if "name" not in patch or patch["name"] == company.name:
            patch.pop("name", None)
            return self.records.update_company(company.id, patch)

        updated = self.allocator.claim(
            patch["name"], lambda candidate: self.records.update_company(company.id, patch, candidate)
        )
        if updated.slug != company.slug:
            logger.info("Company %s renamed, slug is now %s", company.slug, updated.slug)
        return updated

    def delete(self, slug: str, user_id: int) -> None:
        """
        Delete a company the user owns, with its positions and requests.

        Raises:
            NotFound: If no company has ``slug``
            Forbidden: If ``user_id`` is not the owner
        """
        company = self._owned(slug, user_id)
        self.records.delete_company(company.id)
        logger.info("Deleted company %s (id=%s)", company.slug, company.id)
