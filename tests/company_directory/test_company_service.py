"""Tests for the company lifecycle service."""

import pytest

from company_directory.schemas.company import CompanyCreate, CompanyUpdate
from company_directory.schemas.request import Position, Request, RequestStatus
from company_directory.services.company_service import CompanyService
from company_directory.services.errors import Conflict, Forbidden, InvalidInput, NotFound
from company_directory.stores.memory import InMemoryRecordStore

OWNER_ID = 5


def _create(n: int, name: str = "Acme Co") -> CompanyCreate:
    return CompanyCreate(
        name=name,
        email=f"hr{n}@example.test",
        phone=f"+1-555-010{n}",
        address="1 Main St",
        description="Makes everything",
        pictures=[f"https://cdn.example.test/{n}.png"],
    )


@pytest.fixture
def records():
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def service(records):
    """Company service over the in-memory store."""
    return CompanyService(records)


class TestRegister:
    """Tests for company registration."""

    def test_register_assigns_slug_and_owner(self, service):
        """A new company gets the slug of its name and the caller as owner."""
        company = service.register(_create(1), OWNER_ID)
        assert company.slug == "acme-co"
        assert company.owner_id == OWNER_ID
        assert company.pictures == ["https://cdn.example.test/1.png"]

    def test_same_name_gets_suffixed_slugs(self, service):
        """Acme Co registered three times -> acme-co, acme-co-1, acme-co-2."""
        slugs = [service.register(_create(n), OWNER_ID).slug for n in range(3)]
        assert slugs == ["acme-co", "acme-co-1", "acme-co-2"]

    def test_duplicate_email_conflict(self, service):
        """E-mail addresses are unique across companies."""
        service.register(_create(1), OWNER_ID)
        duplicate = _create(2, "Other").model_copy(update={"email": "hr1@example.test"})
        with pytest.raises(Conflict, match="email"):
            service.register(duplicate, OWNER_ID)

    def test_duplicate_phone_conflict(self, service):
        """Phone numbers are unique across companies."""
        service.register(_create(1), OWNER_ID)
        duplicate = _create(2, "Other").model_copy(update={"phone": "+1-555-0101"})
        with pytest.raises(Conflict, match="phone"):
            service.register(duplicate, OWNER_ID)

    def test_name_without_slug_rejected(self, service, records):
        """A name made only of symbols cannot be registered."""
        with pytest.raises(InvalidInput):
            service.register(_create(1, "&&&"), OWNER_ID)
        assert records.list_companies() == []


class TestGetAndList:
    """Tests for lookups."""

    def test_get_by_slug(self, service):
        """Companies are found by slug."""
        created = service.register(_create(1), OWNER_ID)
        assert service.get("acme-co") == created

    def test_get_missing(self, service):
        """Unknown slug is NotFound."""
        with pytest.raises(NotFound):
            service.get("nope")

    def test_list_all_in_id_order(self, service):
        """list_all returns every company ordered by id."""
        service.register(_create(1, "Beta"), OWNER_ID)
        service.register(_create(2, "Alpha"), OWNER_ID)
        assert [c.slug for c in service.list_all()] == ["beta", "alpha"]


class TestUpdate:
    """Tests for owner updates and renames."""

    def test_rename_reallocates_slug(self, service):
        """A new name produces a new slug."""
        service.register(_create(1), OWNER_ID)
        updated = service.update("acme-co", CompanyUpdate(name="Globex"), OWNER_ID)
        assert updated.slug == "globex"
        assert updated.name == "Globex"
        with pytest.raises(NotFound):
            service.get("acme-co")

    def test_rename_to_current_name_keeps_slug(self, service):
        """Renaming to the same name is a no-op for the slug."""
        service.register(_create(1), OWNER_ID)
        service.register(_create(2), OWNER_ID)
        updated = service.update(
            "acme-co-1", CompanyUpdate(name="Acme Co", address="2 Side St"), OWNER_ID
        )
        assert updated.slug == "acme-co-1"
        assert updated.address == "2 Side St"

    def test_rename_into_collision(self, service):
        """A rename that collides with another company's slug gets a suffix."""
        service.register(_create(1, "Globex"), OWNER_ID)
        service.register(_create(2), OWNER_ID)
        updated = service.update("acme-co", CompanyUpdate(name="Globex"), OWNER_ID)
        assert updated.slug == "globex-1"

    def test_rename_keeps_own_slug_when_base_matches(self, service):
        """A case-only rename resolves to the company's own slug."""
        service.register(_create(1), OWNER_ID)
        updated = service.update("acme-co", CompanyUpdate(name="ACME CO"), OWNER_ID)
        assert updated.slug == "acme-co"
        assert updated.name == "ACME CO"

    def test_update_by_non_owner(self, service):
        """Only the owner may update."""
        service.register(_create(1), OWNER_ID)
        with pytest.raises(Forbidden):
            service.update("acme-co", CompanyUpdate(description="hijacked"), 99)

    def test_update_email_taken(self, service):
        """Cannot take another company's e-mail."""
        service.register(_create(1), OWNER_ID)
        service.register(_create(2, "Globex"), OWNER_ID)
        with pytest.raises(Conflict):
            service.update("globex", CompanyUpdate(email="hr1@example.test"), OWNER_ID)

    def test_update_own_email_allowed(self, service):
        """Re-submitting the company's own e-mail is fine."""
        service.register(_create(1), OWNER_ID)
        updated = service.update("acme-co", CompanyUpdate(email="hr1@example.test"), OWNER_ID)
        assert updated.email == "hr1@example.test"

    def test_explicit_null_clears_optional_fields_only(self, service):
        """Null clears description but is ignored for required fields."""
        service.register(_create(1), OWNER_ID)
        updated = service.update(
            "acme-co", CompanyUpdate(description=None, email=None), OWNER_ID
        )
        assert updated.description is None
        assert updated.email == "hr1@example.test"


class TestDelete:
    """Tests for deletion."""

    def test_delete_removes_company_and_children(self, service, records):
        """Deleting a company drops its positions and requests."""
        company = service.register(_create(1), OWNER_ID)
        records.add_position(Position(id=3, name="QA", company_id=company.id))
        records.add_request(Request(id=7, user_id=42, position_id=3, status=RequestStatus.PENDING))

        service.delete("acme-co", OWNER_ID)

        assert records.list_companies() == []
        assert records.find_position(3) is None
        assert records.find_request(7) is None

    def test_delete_by_non_owner(self, service):
        """Only the owner may delete."""
        service.register(_create(1), OWNER_ID)
        with pytest.raises(Forbidden):
            service.delete("acme-co", 99)
        assert service.get("acme-co").slug == "acme-co"

    def test_delete_missing(self, service):
        """Unknown slug is NotFound."""
        with pytest.raises(NotFound):
            service.delete("nope", OWNER_ID)
