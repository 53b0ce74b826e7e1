"""
Database helper functions — identity lookups and owner-scoped trip queries.

Every trip query in the application goes through this module so that the
``user_id`` filter is never forgotten.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from database.models import Trip, User

logger = logging.getLogger(__name__)

_MAX_TRIP_ID = 2**31 - 1


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


def _to_trip_id(value: str | int) -> Optional[int]:
    """Parse a path id; anything that can't name a trip yields None."""
    try:
        tid = int(value)
    except (TypeError, ValueError):
        return None
    # Trip.id is a signed 32-bit column.
    if not 0 < tid <= _MAX_TRIP_ID:
        return None
    return tid


# ── Identities ──────────────────────────────────────────────────────


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    # No unique constraint: concurrent registrations may have admitted twins.
    return result.scalars().first()


async def get_user_by_id(session: AsyncSession, user_id: str) -> Optional[User]:
    try:
        uid = _to_uuid(user_id)
    except ValueError:
        return None
    result = await session.execute(select(User).where(User.user_id == uid))
    return result.scalar_one_or_none()


# ── Trips (owner-scoped) ────────────────────────────────────────────


def owned_trip_filter(trip_id: int, user_id: str) -> ColumnElement[bool]:
    """Joint predicate locating a trip by id *and* owner."""
    return and_(Trip.id == trip_id, Trip.user_id == user_id)


async def get_owned_trip(
    session: AsyncSession,
    trip_id: str | int,
    user_id: str,
) -> Optional[Trip]:
    """
    Return the trip only if ``user_id`` owns it.

    A missing trip and a trip owned by someone else are indistinguishable
    to the caller: both return None.
    """
    tid = _to_trip_id(trip_id)
    if tid is None:
        return None
    result = await session.execute(select(Trip).where(owned_trip_filter(tid, user_id)))
    return result.scalar_one_or_none()


async def list_user_trips(session: AsyncSession, user_id: str) -> List[Trip]:
    """All trips of one owner, bookmarked first, insertion order within each group."""
    result = await session.execute(
        select(Trip)
        .where(Trip.user_id == user_id)
        .order_by(Trip.is_bookmarked.desc(), Trip.id.asc())
    )
    return list(result.scalars().all())


async def search_user_trips(
    session: AsyncSession,
    user_id: str,
    query: str,
) -> List[Trip]:
    """Case-insensitive substring search over one owner's titles and contents."""
    pattern = f"%{query}%"
    result = await session.execute(
        select(Trip)
        .where(
            Trip.user_id == user_id,
            or_(Trip.title.ilike(pattern), Trip.content.ilike(pattern)),
        )
        .order_by(Trip.is_bookmarked.desc(), Trip.id.asc())
    )
    return list(result.scalars().all())
