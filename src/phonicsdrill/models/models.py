"""Database models for progress storage."""
from sqlalchemy import Column, String, Text

from phonicsdrill.models.base import Base, TimestampMixin


class StoredValue(Base, TimestampMixin):
    """A single key-value entry of the durable progress storage."""

    __tablename__ = "stored_values"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
