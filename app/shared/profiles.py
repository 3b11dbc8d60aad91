from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from app.timezones.data import is_valid_zone_id

_TRUE_VALUES = {"1", "true", "yes", "y", "12h"}
_FALSE_VALUES = {"0", "false", "no", "n", "24h"}


@dataclass(frozen=True)
class UserProfile:
    user: str
    timezone: str
    favorite_timezones: Optional[str] = None
    hour12: Optional[bool] = None
    full_name: Optional[str] = None


def _parse_hour12(raw: Optional[str]) -> Optional[bool]:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


class ProfileDirectory:
    """In-memory caller preferences keyed by handle (local zone, favorites, clock)."""

    def __init__(self, csv_path: Optional[Path] = None):
        self._profiles: Dict[str, UserProfile] = {}
        if csv_path and csv_path.exists():
            self.load_csv(csv_path)

    def __len__(self) -> int:
        return len(self._profiles)

    def load_csv(self, csv_path: Path) -> None:
        with csv_path.open("r", encoding="utf-8") as fh:
            reader = csv.DictReader(fh)
            for row in reader:
                handle = (row.get("user") or row.get("handle") or "").strip()
                timezone = (row.get("timezone") or "").strip()
                if not handle or not timezone:
                    continue
                if not is_valid_zone_id(timezone):
                    logger.warning(
                        "Skipping profile with unknown timezone",
                        user=handle,
                        timezone=timezone,
                    )
                    continue
                self.add(
                    UserProfile(
                        user=handle,
                        timezone=timezone,
                        favorite_timezones=row.get("favorite_timezones") or None,
                        hour12=_parse_hour12(row.get("hour12")),
                        full_name=row.get("full_name"),
                    )
                )
        logger.info("Loaded user profiles", path=str(csv_path), count=len(self))

    def add(self, profile: UserProfile) -> None:
        self._profiles[profile.user.lower()] = profile

    def get(self, user: str) -> Optional[UserProfile]:
        return self._profiles.get(user.lower())
