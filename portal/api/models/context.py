"""Authenticated caller context."""

from pydantic import BaseModel, Field


class CallerContext(BaseModel):
    """Identity of the principal making a request."""

    caller: str = Field(..., min_length=1, description="Principal identity (JWT subject)")
