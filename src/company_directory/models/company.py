"""Company database model."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from company_directory.database import Base


class Company(Base):
    """
    Company model representing an employer listed in the directory.

    Attributes:
        id: Primary key
        name: Display name
        slug: Public identifier derived from the name (unique)
        email: Contact e-mail (unique)
        phone: Contact phone (unique)
        address: Postal address
        description: Free-form description
        pictures: Ordered list of picture URLs
        owner_id: Id of the user who owns the company
        created_at: Timestamp when record was created
    """

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    phone = Column(String, nullable=False, unique=True, index=True)
    address = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    pictures = Column(JSON, nullable=False, default=list)
    owner_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Company."""
        return f"<Company(id={self.id}, name='{self.name}', slug='{self.slug}')>"
