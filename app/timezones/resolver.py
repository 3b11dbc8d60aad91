from __future__ import annotations

from typing import List, Optional

from app.timezones.data import (
    ABBREVIATIONS,
    CITIES,
    FULL_NAMES,
    SHORT_FORMS,
    is_valid_zone_id,
)


def _title_case_zone(text: str) -> str:
    """Turn ``europe/berlin`` into ``Europe/Berlin`` (``_`` words included)."""
    return "/".join(
        "_".join(word[:1].upper() + word[1:].lower() for word in segment.split("_"))
        for segment in text.split("/")
    )


def resolve(text: str) -> List[str]:
    """Resolve free text to canonical zone ids.

    Returns an empty list when nothing matches and several ids when an
    abbreviation is ambiguous (the first id is the default reading).
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return []

    if is_valid_zone_id(trimmed):
        return [trimmed]

    guess = _title_case_zone(trimmed)
    if guess != trimmed and is_valid_zone_id(guess):
        return [guess]

    lower = trimmed.lower()

    if lower in SHORT_FORMS:
        return [SHORT_FORMS[lower]]

    if lower in ABBREVIATIONS:
        return list(ABBREVIATIONS[lower])

    if lower in CITIES:
        return [CITIES[lower]]

    return []


def is_ambiguous(label: str) -> bool:
    return len(ABBREVIATIONS.get((label or "").strip().lower(), ())) > 1


def disambiguation_label(zone_id: str, source_label: str) -> Optional[str]:
    """Full-name label for zones reached through an ambiguous abbreviation."""
    if not is_ambiguous(source_label):
        return None
    return FULL_NAMES.get(zone_id, zone_id)
