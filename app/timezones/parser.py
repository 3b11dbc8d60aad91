from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from app.timezones.resolver import resolve
from models.time_conversion import ConvertedTime, ParsedQuery, QueryErrorKind

TIME_RE = re.compile(r"^(\d{1,2})(?:[:.](\d{2}))?\s*(am|pm)?", re.IGNORECASE)
TO_RE = re.compile(r"\bto\b", re.IGNORECASE)

ZONE_HINT = "Try CET, Berlin, or Europe/Berlin"
EMPTY_QUERY = "Empty query. Try something like: 7:22 CET or 7:22pm PST to CET"
INVALID_TIME_FORMAT = (
    "Invalid time format. Use HH, HH:MM, or HH.MM, e.g., 11 CET, 7:22, or 7.22pm"
)
HOUR_RANGE_12H = "Invalid time: hour must be 1-12 when using AM/PM"
HOUR_RANGE_24H = "Invalid time: hour must be 0-23"
MINUTE_RANGE = "Invalid time: minutes must be 0-59"
MISSING_SOURCE = "Missing source timezone. Try: 7:22 CET"


def _failure(kind: QueryErrorKind, error: str, **fields) -> ParsedQuery:
    logger.debug("Query rejected", error_kind=kind.value, error=error)
    return ParsedQuery(error=error, error_kind=kind, **fields)


def format_clock_text(hour: int, minute: int) -> str:
    """Render ``H:MM`` in 24h form, e.g. ``7:05`` or ``19:30``."""
    return f"{hour}:{minute:02d}"


def parse(query: str) -> ParsedQuery:
    """Parse ``"<time> <zone> [to <zone>]"`` into a :class:`ParsedQuery`.

    Problems never raise; they come back on ``error``/``error_kind`` and
    the first failing check wins.
    """
    trimmed = (query or "").strip()
    if not trimmed:
        return _failure(QueryErrorKind.EMPTY_INPUT, EMPTY_QUERY)

    match = TIME_RE.match(trimmed)
    if match is None:
        return _failure(QueryErrorKind.MALFORMED_TIME, INVALID_TIME_FORMAT)

    parsed = _parse_from(trimmed, match, match.end())
    glued = match.group(3) and trimmed[match.end():match.end() + 1].isalpha()
    if parsed.ok or not glued:
        return parsed

    # "9 America/New_York": the "am" belonged to the zone name
    digits_end = match.end(2) if match.group(2) else match.end(1)
    plain = _parse_from(trimmed, match, digits_end)
    if plain.ok or plain.source_zone:
        return plain
    return parsed


def _parse_from(trimmed: str, match: re.Match, time_end: int) -> ParsedQuery:
    time_text = trimmed[:time_end].strip()
    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    meridiem = (match.group(3) or "").lower() if time_end == match.end() else ""

    if meridiem:
        if not 1 <= hour <= 12:
            return _failure(
                QueryErrorKind.TIME_RANGE,
                HOUR_RANGE_12H,
                time_text=time_text,
                hour=hour,
                minute=minute,
            )
        if meridiem == "pm" and hour != 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
    elif hour > 23:
        return _failure(
            QueryErrorKind.TIME_RANGE,
            HOUR_RANGE_24H,
            time_text=time_text,
            hour=hour,
            minute=minute,
        )

    if minute > 59:
        return _failure(
            QueryErrorKind.TIME_RANGE,
            MINUTE_RANGE,
            time_text=time_text,
            hour=hour,
            minute=minute,
        )

    rest = trimmed[time_end:].strip()

    target_part: Optional[str] = None
    to_match = TO_RE.search(rest)
    if to_match:
        source_part = rest[: to_match.start()].strip()
        target_part = rest[to_match.end():].strip()
    else:
        source_part = rest

    if not source_part:
        return _failure(
            QueryErrorKind.MISSING_SOURCE,
            MISSING_SOURCE,
            time_text=time_text,
            hour=hour,
            minute=minute,
        )

    source_matches = resolve(source_part)
    if not source_matches:
        return _failure(
            QueryErrorKind.UNKNOWN_SOURCE,
            f'Unknown timezone: "{source_part}". {ZONE_HINT}',
            time_text=time_text,
            hour=hour,
            minute=minute,
            source_label=source_part,
        )
    source_zone = source_matches[0]

    target_zone: Optional[str] = None
    if target_part:
        target_matches = resolve(target_part)
        if not target_matches:
            return _failure(
                QueryErrorKind.UNKNOWN_TARGET,
                f'Unknown target timezone: "{target_part}". {ZONE_HINT}',
                time_text=time_text,
                hour=hour,
                minute=minute,
                source_zone=source_zone,
                source_label=source_part,
            )
        target_zone = target_matches[0]

    return ParsedQuery(
        time_text=time_text,
        hour=hour,
        minute=minute,
        source_zone=source_zone,
        source_label=source_part,
        target_zone=target_zone,
    )


def requery(converted: ConvertedTime) -> ParsedQuery:
    """Use a conversion result as the source of a new query, without text parsing."""
    return ParsedQuery(
        time_text=format_clock_text(converted.hour, converted.minute),
        hour=converted.hour,
        minute=converted.minute,
        source_zone=converted.zone_id,
        source_label=converted.zone_id,
    )
