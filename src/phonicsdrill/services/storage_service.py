"""Durable key-value storage backed by the database."""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from phonicsdrill.exceptions import StorageError
from phonicsdrill.models.models import StoredValue

logger = logging.getLogger(__name__)


class StorageService:
    """Stores text values under string keys, one row per key."""

    def __init__(self, db: Session):
        """Initialize the service with a database session."""
        self.db = db

    def restore(self, key: str) -> Optional[str]:
        """Get the value stored under a key, or None if there is none."""
        try:
            stored = self.db.query(StoredValue).filter(StoredValue.key == key).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to read {key!r}: {e}") from e
        return stored.value if stored else None

    def persist(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        try:
            stored = self.db.query(StoredValue).filter(StoredValue.key == key).first()
            if stored:
                stored.value = value
            else:
                self.db.add(StoredValue(key=key, value=value))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to write {key!r}: {e}") from e

    def remove(self, key: str) -> bool:
        """Delete a key. Returns False if it was not stored."""
        try:
            deleted = self.db.query(StoredValue).filter(StoredValue.key == key).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to remove {key!r}: {e}") from e
        return bool(deleted)
