"""Position database model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from company_directory.database import Base


class Position(Base):
    """
    Position model representing an opening at a company.

    Attributes:
        id: Primary key
        name: Position title
        company_id: Foreign key to companies table
        created_at: Timestamp when record was created
    """

    __tablename__ = "positions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    company_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Position."""
        return f"<Position(id={self.id}, name='{self.name}', company_id={self.company_id})>"
