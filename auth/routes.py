"""
Auth API routes — create account, login, current user.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from auth.jwt import create_token
from auth.models import User
from auth.password import hash_password, verify_password
from database.helpers import get_user_by_email, get_user_by_id
from utils.schemas import CreateAccountRequest, LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/create-account", status_code=status.HTTP_201_CREATED)
async def create_account(
    req: CreateAccountRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user and hand back an access token."""
    if not req.full_name:
        raise _bad_request("Full Name is required")
    if not req.email:
        raise _bad_request("Email is required")
    if not req.password:
        raise _bad_request("Password is required")

    # Check-then-insert; two concurrent requests for one email can both pass.
    if await get_user_by_email(session, req.email) is not None:
        raise _bad_request("User already exist")

    user = User(
        user_id=uuid.uuid4(),
        full_name=req.full_name,
        email=req.email,
        password_hash=hash_password(req.password),
    )
    session.add(user)
    await session.commit()

    token = create_token(str(user.user_id))
    logger.info("Registered user %s (%s)", user.email, user.user_id)

    return {
        "error": False,
        "user": {"fullName": user.full_name, "email": user.email},
        "accessToken": token,
        "message": "Registration Successful",
    }


@router.post("/login")
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password."""
    if not req.email:
        raise _bad_request("Email is required")
    if not req.password:
        raise _bad_request("Password is required")

    user = await get_user_by_email(session, req.email)
    if user is None:
        raise _bad_request("User not found")
    if not verify_password(req.password, user.password_hash):
        logger.info("Failed login for %s", req.email)
        raise _bad_request("Invalid Credentials")

    token = create_token(str(user.user_id))
    logger.info("Login: %s (%s)", user.email, user.user_id)

    return {
        "error": False,
        "email": user.email,
        "accessToken": token,
        "message": "Login Successful",
    }


@router.get("/get-user")
async def get_user(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Profile of the token's owner."""
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
        )
    return {"error": False, "user": user.to_dict(), "message": ""}
