"""Company Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CompanyBase(BaseModel):
    """Base company schema with common fields."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(min_length=1)
    address: str | None = None
    description: str | None = None
    pictures: list[str] = Field(default_factory=list)


class CompanyCreate(CompanyBase):
    """Schema for registering a new company."""

    pass


class CompanyUpdate(BaseModel):
    """Schema for a partial company update; omitted fields stay unchanged."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=3)
    phone: str | None = Field(default=None, min_length=1)
    address: str | None = None
    description: str | None = None
    pictures: list[str] | None = None


class Company(CompanyBase):
    """Complete company schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    owner_id: int
    created_at: datetime
