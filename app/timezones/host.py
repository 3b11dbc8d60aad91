from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from loguru import logger
from tzlocal import get_localzone_name

from app.timezones.data import is_valid_zone_id


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def detect_local_zone(configured: Optional[str] = None) -> str:
    """Pick the caller's local zone: configured value, then the OS, then UTC."""
    if configured:
        return configured
    try:
        detected = get_localzone_name()
    except (LookupError, OSError, ValueError) as exc:
        logger.warning("Could not detect local timezone", error=str(exc))
        return "UTC"
    if detected and is_valid_zone_id(detected):
        return detected
    logger.warning("OS timezone is not a canonical zone id", detected=detected)
    return "UTC"


@dataclass(frozen=True)
class HostContext:
    """Clock, local zone and clock-format preference the converter relies on."""

    local_zone: str = "UTC"
    hour12: bool = True
    clock: Callable[[], datetime] = field(default=_utc_now, compare=False)

    def now(self) -> datetime:
        current = self.clock()
        if current.tzinfo is None:
            return current.replace(tzinfo=timezone.utc)
        return current.astimezone(timezone.utc)

    def with_overrides(
        self,
        *,
        local_zone: Optional[str] = None,
        hour12: Optional[bool] = None,
    ) -> "HostContext":
        return HostContext(
            local_zone=local_zone or self.local_zone,
            hour12=self.hour12 if hour12 is None else hour12,
            clock=self.clock,
        )

    @classmethod
    def from_settings(cls, settings) -> "HostContext":
        return cls(
            local_zone=detect_local_zone(settings.local_timezone),
            hour12=settings.hour12,
        )


_default_host: Optional[HostContext] = None


def default_host() -> HostContext:
    """Lazily build the process-wide host context from application settings."""
    global _default_host
    if _default_host is None:
        from app.config import settings

        _default_host = HostContext.from_settings(settings)
    return _default_host
