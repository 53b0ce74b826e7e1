"""
Pydantic request schemas for the HTTP API.

Fields are optional at the schema level; handlers decide what is missing
so each endpoint can answer with its own message.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class CreateAccountRequest(_CamelModel):
    full_name: Optional[str] = Field(None, alias="fullName")
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(_CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# Trips
# ═══════════════════════════════════════════════════════════════════════════════


class AddTripRequest(_CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None


class EditTripRequest(_CamelModel):
    """Partial update: ``None`` means "leave unchanged"."""

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    is_bookmarked: Optional[bool] = Field(None, alias="isBookMarked")

    def has_changes(self) -> bool:
        return bool(
            self.title
            or self.content
            or self.tags is not None
            or self.is_bookmarked is not None
        )


class UpdateBookmarkRequest(_CamelModel):
    is_bookmarked: Optional[bool] = Field(None, alias="isBookMarked")
