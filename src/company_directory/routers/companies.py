"""Companies API router - register, list, detail, update and delete endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from company_directory.database import get_db
from company_directory.dependencies import get_current_user_id
from company_directory.schemas.company import Company, CompanyCreate, CompanyUpdate
from company_directory.services.company_service import CompanyService
from company_directory.stores.sql import SqlRecordStore

router = APIRouter()


@router.get("/companies", response_model=list[Company])
def list_companies(db: Session = Depends(get_db)) -> list[Company]:
    """
    List all companies in the directory.

    Returns:
        Companies ordered by id.
    """
    return CompanyService(SqlRecordStore(db)).list_all()


@router.post("/companies", response_model=Company, status_code=201)
def register_company(
    data: CompanyCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Company:
    """
    Register a company owned by the calling user.

    Returns:
        The created company, including its allocated slug.

    Raises:
        409: If the e-mail or phone is already registered.
    """
    company = CompanyService(SqlRecordStore(db)).register(data, user_id)
    db.commit()
    return company


@router.get("/companies/{slug}", response_model=Company)
def get_company(slug: str, db: Session = Depends(get_db)) -> Company:
    """
    Get a company by its slug.

    Raises:
        404: If no company has this slug.
    """
    return CompanyService(SqlRecordStore(db)).get(slug)


@router.patch("/companies/{slug}", response_model=Company)
def update_company(
    slug: str,
    data: CompanyUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Company:
    """
    Update a company the calling user owns.

    Renaming the company re-allocates its slug.

    Raises:
        404: If no company has this slug.
        403: If the caller is not the owner.
        409: If the new e-mail or phone belongs to another company.
    """
    company = CompanyService(SqlRecordStore(db)).update(slug, data, user_id)
    db.commit()
    return company


@router.delete("/companies/{slug}", status_code=204)
def delete_company(
    slug: str,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Response:
    """
    Delete a company the calling user owns.

    Raises:
        404: If no company has this slug.
        403: If the caller is not the owner.
    """
    CompanyService(SqlRecordStore(db)).delete(slug, user_id)
    db.commit()
    return Response(status_code=204)
