"""Data models for podcast episodes."""

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

# Pydantic would read these as Unix timestamps
_NUMERIC = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*")


class Episode(BaseModel):
    """A single episode decoded from a markdown document.

    Everything except ``path`` and ``body`` comes from the document's front
    matter. The loader fills those two in when it builds the final record.

    Example:
        >>> episode = Episode(
        ...     title="Pilot",
        ...     date="2024-03-01T12:00:00+01:00",
        ...     file="https://cdn.example.com/pilot.mp3",
        ...     duration="1:02:03",
        ...     length="12345678",
        ... )
        >>> episode.date.isoformat()
        '2024-03-01T11:00:00+00:00'
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Episode title")
    date: AwareDatetime = Field(..., description="Publication time (UTC)")
    slug: Optional[str] = Field(None, description="URL identifier")
    file: str = Field(..., description="URL or path of the media file")
    duration: str = Field(..., description="Display duration, e.g. 1:02:03")
    length: str = Field(..., description="Display length, e.g. size in bytes")
    reddit: Optional[str] = Field(None, description="Discussion thread URL")

    # Filled in by the loader
    path: Optional[Path] = Field(None, description="Source document path")
    body: str = Field("", description="Markdown body after the front matter")

    @field_validator("date", mode="before")
    @classmethod
    def _require_timestamp_text(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or _NUMERIC.fullmatch(value):
            raise ValueError("expected an ISO 8601 timestamp with a UTC offset")
        return value

    @field_validator("date")
    @classmethod
    def _normalize_to_utc(cls, value: datetime) -> datetime:
        return value.astimezone(timezone.utc)

    @property
    def series(self) -> Optional[str]:
        """Name of the series directory the episode was loaded from."""
        if self.path is None:
            return None
        return self.path.parent.name
