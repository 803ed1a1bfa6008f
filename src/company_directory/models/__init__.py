"""Database models package."""

from company_directory.models.company import Company
from company_directory.models.notification_bucket import NotificationBucket
from company_directory.models.position import Position
from company_directory.models.request import Request

__all__ = ["Company", "Position", "Request", "NotificationBucket"]
