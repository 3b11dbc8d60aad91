from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class QueryErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    MALFORMED_TIME = "malformed_time"
    TIME_RANGE = "time_range"
    MISSING_SOURCE = "missing_source"
    UNKNOWN_SOURCE = "unknown_source"
    UNKNOWN_TARGET = "unknown_target"


class ParsedQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    time_text: str = Field("", description="Time as typed, e.g. '7:22pm'")
    hour: int = Field(0, description="Hour in 24h form (0-23)")
    minute: int = Field(0, description="Minute (0-59)")
    source_zone: str = Field("", description="IANA timezone, e.g. 'Europe/Berlin'")
    source_label: str = Field("", description="Source phrase as typed, e.g. 'CET'")
    target_zone: Optional[str] = Field(None, description="Explicit target IANA timezone")
    error: Optional[str] = Field(None, description="User-facing parse error")
    error_kind: Optional[QueryErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ConvertedTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone_id: str = Field(..., description="IANA timezone, e.g. 'America/New_York'")
    abbreviation: str = Field(..., description="Short zone name, e.g. 'EST'")
    formatted_time: str = Field(..., description="Clock text, e.g. '7:22 PM' or '19:22'")
    utc_offset_text: str = Field(..., description="UTC offset, e.g. '+05:30'")
    day_offset: int = Field(0, description="Calendar days relative to the source date")
    is_local: bool = False
    label: Optional[str] = Field(None, description="Disambiguation name")
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)

    @property
    def display_text(self) -> str:
        return f"{self.formatted_time} {self.abbreviation}"

    @property
    def day_offset_text(self) -> Optional[str]:
        if self.day_offset == 0:
            return None
        sign = "+" if self.day_offset > 0 else ""
        return f"{sign}{self.day_offset} day"

    @property
    def accessories(self) -> List[str]:
        """Side notes shown next to a row: offset, local marker, day shift."""
        notes = [f"UTC{self.utc_offset_text}"]
        if self.is_local:
            notes.append("Local")
        if self.day_offset_text:
            notes.append(self.day_offset_text)
        return notes

    @property
    def row_text(self) -> str:
        return (
            f"{self.display_text} - {self.label or self.zone_id} "
            f"[{', '.join(self.accessories)}]"
        )


class TargetZone(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone_id: str
    label: Optional[str] = None


class ConversionReport(BaseModel):
    title: str = Field(..., description="Section title, e.g. '7:22pm PST'")
    summary: str = Field(..., description="All conversions joined with ' = '")
    query: ParsedQuery
    conversions: List[ConvertedTime]
    invalid_favorites: List[str] = Field(default_factory=list)
