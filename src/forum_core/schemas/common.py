"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from typing import Final

from pydantic import BaseModel, Field

# Range of the 32-bit INTEGER columns used for identifiers and votes.
STORE_INT_MIN: Final = -(2**31)
STORE_INT_MAX: Final = 2**31 - 1


class DeletionResponse(BaseModel):
    """Outcome of a delete or anonymize call with the rows it removed."""

    outcome: str = Field(..., description="deleted, anonymized or nothing_to_do")
    sections: int = 0
    topics: int = 0
    comments: int = 0
    likes: int = 0


class ErrorResponse(BaseModel):
    """Body returned for every handled forum error."""

    detail: str
    error: str
