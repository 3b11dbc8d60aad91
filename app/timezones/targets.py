from __future__ import annotations

from typing import Dict, List, Optional

from loguru import logger

from app.timezones.host import HostContext, default_host
from app.timezones.resolver import resolve
from models.time_conversion import ParsedQuery, TargetZone


def split_favorites(favorites_setting: str) -> List[str]:
    """Split the comma-separated favorites setting, dropping blank entries."""
    entries = (entry.strip() for entry in (favorites_setting or "").split(","))
    return [entry for entry in entries if entry]


def list_invalid_favorites(favorites_setting: str) -> List[str]:
    return [entry for entry in split_favorites(favorites_setting) if not resolve(entry)]


def assemble_targets(
    parsed: ParsedQuery,
    favorites_setting: str,
    *,
    host: Optional[HostContext] = None,
) -> List[TargetZone]:
    """Ordered, de-duplicated zones to show: local, explicit target, favorites."""
    host = host or default_host()
    targets: Dict[str, TargetZone] = {}

    def add(zone_id: str, label: Optional[str] = None) -> None:
        if zone_id not in targets:
            targets[zone_id] = TargetZone(zone_id=zone_id, label=label)

    add(host.local_zone)

    if parsed.target_zone:
        resolved = resolve(parsed.target_zone)
        if not resolved:
            add(parsed.target_zone)
        for zone_id in resolved:
            add(zone_id)

    for entry in split_favorites(favorites_setting):
        resolved = resolve(entry)
        if not resolved:
            logger.debug("Skipping unknown favorite timezone", entry=entry)
        for zone_id in resolved:
            add(zone_id)

    return list(targets.values())
