"""Record and notification stores."""

from company_directory.stores.memory import InMemoryNotificationStore, InMemoryRecordStore
from company_directory.stores.ports import NotificationStore, RecordStore, notes_key
from company_directory.stores.sql import SqlNotificationStore, SqlRecordStore

__all__ = [
    "InMemoryNotificationStore",
    "InMemoryRecordStore",
    "NotificationStore",
    "RecordStore",
    "SqlNotificationStore",
    "SqlRecordStore",
    "notes_key",
]
