"""Hiring request database model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from company_directory.database import Base


class Request(Base):
    """
    Request model representing a candidate's application to a position.

    Attributes:
        id: Primary key
        user_id: Id of the requesting user
        position_id: Foreign key to positions table
        status: Moderation status (pending, accepted, rejected)
        deny_reason: Reason given by the owner; set only when rejected
        created_at: Timestamp when record was created
    """

    __tablename__ = "requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    position_id = Column(
        Integer, ForeignKey("positions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status = Column(String, default="pending", nullable=False)
    deny_reason = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Request."""
        return (
            f"<Request(id={self.id}, user_id={self.user_id}, "
            f"position_id={self.position_id}, status='{self.status}')>"
        )
