from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from app.timezones.host import HostContext, default_host
from models.time_conversion import ConvertedTime

_NUMERIC_TZNAME_RE = re.compile(r"^([+-])(\d{2})(\d{2})?$")


def _offset_minutes(moment: datetime) -> int:
    offset = moment.utcoffset() or timedelta(0)
    return int(offset.total_seconds() // 60)


def format_utc_offset(offset_minutes: int) -> str:
    """Format an offset in minutes as ``+05:30`` or ``-08:00``."""
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _abbreviation(moment: datetime, zone_id: str) -> str:
    # zones without a lettered name report "+08" or "+0530"
    name = moment.tzname()
    if not name:
        return zone_id
    numeric = _NUMERIC_TZNAME_RE.match(name)
    if numeric is None:
        return name
    sign, hours, minutes = numeric.groups()
    text = f"GMT{sign}{int(hours)}"
    if minutes and minutes != "00":
        text += f":{minutes}"
    return text


def format_local_time(hour: int, minute: int, hour12: bool = True) -> str:
    if not hour12:
        return f"{hour:02d}:{minute:02d}"
    meridiem = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:{minute:02d} {meridiem}"


def convert(
    hour: int,
    minute: int,
    source_zone: str,
    target_zone: str,
    label: Optional[str] = None,
    *,
    host: Optional[HostContext] = None,
) -> ConvertedTime:
    """Convert wall-clock ``hour:minute`` in ``source_zone`` to ``target_zone``.

    The wall clock is anchored to today's UTC date. Zone ids must already be
    validated; an unknown id raises ``ZoneInfoNotFoundError``.
    """
    host = host or default_host()
    source = ZoneInfo(source_zone)
    target = ZoneInfo(target_zone)

    today = host.now().date()
    reference = datetime(
        today.year, today.month, today.day, hour, minute, tzinfo=timezone.utc
    )

    source_offset = _offset_minutes(reference.astimezone(source))
    instant = reference - timedelta(minutes=source_offset)

    source_local = instant.astimezone(source)
    target_local = instant.astimezone(target)
    day_offset = (target_local.date() - source_local.date()).days

    return ConvertedTime(
        zone_id=target_zone,
        abbreviation=_abbreviation(target_local, target_zone),
        formatted_time=format_local_time(
            target_local.hour, target_local.minute, host.hour12
        ),
        utc_offset_text=format_utc_offset(_offset_minutes(target_local)),
        day_offset=day_offset,
        is_local=target_zone == host.local_zone,
        label=label,
        hour=target_local.hour,
        minute=target_local.minute,
    )
