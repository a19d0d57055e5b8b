"""Database models package."""

from wildtrail.models.saved_record import SavedRecord

__all__ = ["SavedRecord"]
