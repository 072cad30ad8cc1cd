"""
Domain models for persisted dashboard data using Pydantic.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class SummaryRecord(BaseModel):
    """One successful fetch as stored: derived text plus insertion timestamp."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    source: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; the store always writes UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
