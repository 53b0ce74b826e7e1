"""
SQLAlchemy ORM models for identities and trips.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import DeclarativeBase

# Evaluated once at import: every trip created by this process shares it
# unless the caller sets ``created_on`` explicitly.
_LOADED_AT = datetime.now(timezone.utc)


def _iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    # SQLite hands back naive values; they were written as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(String(128), nullable=False)
    # Uniqueness is checked by the registration handler only.
    email = Column(String(255), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_on = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": str(self.user_id),
            "fullName": self.full_name,
            "email": self.email,
            "createdOn": _iso(self.created_on),
        }


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    tags = Column(JSON().with_variant(ARRAY(Text), "postgresql"), nullable=False, default=list)
    is_bookmarked = Column(Boolean, nullable=False, default=False)
    user_id = Column(String(64), nullable=False, index=True)
    created_on = Column(DateTime(timezone=True), default=_LOADED_AT)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase wire representation."""
        return {
            "_id": str(self.id),
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags or []),
            "isBookMarked": bool(self.is_bookmarked),
            "userId": self.user_id,
            "createdOn": _iso(self.created_on),
        }
