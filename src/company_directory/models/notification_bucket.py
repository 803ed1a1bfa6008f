"""NotificationBucket database model (per-user message list)."""

from sqlalchemy import JSON, Column, Integer, String

from company_directory.database import Base


class NotificationBucket(Base):
    """
    Key-value row holding one user's ordered notification messages.

    Attributes:
        key: Bucket key, ``user:<id>:notes``
        messages: Ordered list of message strings
        version: Incremented on every write; used for compare-and-swap appends
    """

    __tablename__ = "notification_buckets"

    key = Column(String, primary_key=True)
    messages = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        """String representation of NotificationBucket."""
        return f"<NotificationBucket(key='{self.key}', version={self.version})>"
