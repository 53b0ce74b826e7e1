"""
Trip API routes. Every handler is scoped to the authenticated user.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from database.helpers import get_owned_trip, list_user_trips, search_user_trips
from database.models import Trip
from utils.schemas import AddTripRequest, EditTripRequest, UpdateBookmarkRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["trips"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")


@router.get("/")
async def root() -> Dict[str, Any]:
    return {"error": False, "message": "Hello from the server!"}


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    return {"error": False, "status": "ok", "message": "Service is healthy"}


# ── Trips ──────────────────────────────────────────────────────────────


@router.post("/add-trip", status_code=status.HTTP_201_CREATED)
async def add_trip(
    req: AddTripRequest,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Create a trip owned by the caller."""
    if not req.title:
        raise HTTPException(status_code=400, detail="Title is required")
    if not req.content:
        raise HTTPException(status_code=400, detail="Content is required")

    trip = Trip(
        title=req.title,
        content=req.content,
        tags=req.tags or [],
        user_id=user_id,
    )
    session.add(trip)
    await session.commit()

    logger.info("Trip %s added for user %s", trip.id, user_id)
    return {"error": False, "trip": trip.to_dict(), "message": "Trip added successfully"}


@router.put("/edit-trip/{trip_id}")
async def edit_trip(
    trip_id: str,
    req: Optional[EditTripRequest] = None,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """
    Partially update a trip.

    Empty strings for ``title``/``content`` are ignored; ``isBookMarked``
    is applied whenever present, including ``false``.
    """
    req = req or EditTripRequest()
    if not req.has_changes():
        raise HTTPException(status_code=400, detail="No changes provided")

    trip = await get_owned_trip(session, trip_id, user_id)
    if trip is None:
        raise _not_found()

    if req.title:
        trip.title = req.title
    if req.content:
        trip.content = req.content
    if req.tags is not None:
        trip.tags = list(req.tags)
    if req.is_bookmarked is not None:
        trip.is_bookmarked = req.is_bookmarked
    await session.commit()

    logger.info("Trip %s updated by user %s", trip.id, user_id)
    return {"error": False, "trip": trip.to_dict(), "message": "Trip updated successfully"}


@router.get("/get-all-trips")
async def get_all_trips(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """List the caller's trips, bookmarked ones first."""
    trips = await list_user_trips(session, user_id)
    return {
        "error": False,
        "trips": [t.to_dict() for t in trips],
        "message": "All trips retrieved successfully",
    }


@router.get("/search-trips")
async def search_trips(
    query: str = Query(""),
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    if not query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    trips = await search_user_trips(session, user_id, query.strip())
    return {
        "error": False,
        "trips": [t.to_dict() for t in trips],
        "message": "Trips matching the search query retrieved successfully",
    }


@router.delete("/delete-trip/{trip_id}")
async def delete_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Permanently delete one of the caller's trips."""
    trip = await get_owned_trip(session, trip_id, user_id)
    if trip is None:
        raise _not_found()

    await session.delete(trip)
    await session.commit()

    logger.info("Trip %s deleted by user %s", trip_id, user_id)
    return {"error": False, "message": "Trip deleted successfully"}


@router.put("/update-bookmark/{trip_id}")
async def update_bookmark(
    trip_id: str,
    req: UpdateBookmarkRequest,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    if req.is_bookmarked is None:
        raise HTTPException(status_code=400, detail="isBookMarked is required")

    trip = await get_owned_trip(session, trip_id, user_id)
    if trip is None:
        raise _not_found()

    trip.is_bookmarked = req.is_bookmarked
    await session.commit()

    return {"error": False, "trip": trip.to_dict(), "message": "Bookmark updated successfully"}
