"""Pydantic schemas package."""

from company_directory.schemas.company import (
    Company,
    CompanyBase,
    CompanyCreate,
    CompanyUpdate,
)
from company_directory.schemas.request import (
    Decision,
    DecisionCreate,
    DecisionResult,
    Position,
    Request,
    RequestStatus,
)

__all__ = [
    "Company",
    "CompanyBase",
    "CompanyCreate",
    "CompanyUpdate",
    "Decision",
    "DecisionCreate",
    "DecisionResult",
    "Position",
    "Request",
    "RequestStatus",
]
