from app.timezones.converter import convert, format_utc_offset
from app.timezones.data import is_valid_zone_id
from app.timezones.host import HostContext, default_host
from app.timezones.parser import format_clock_text, parse, requery
from app.timezones.resolver import disambiguation_label, resolve
from app.timezones.targets import assemble_targets, list_invalid_favorites

__all__ = [
    "HostContext",
    "assemble_targets",
    "convert",
    "default_host",
    "disambiguation_label",
    "format_clock_text",
    "format_utc_offset",
    "is_valid_zone_id",
    "list_invalid_favorites",
    "parse",
    "requery",
    "resolve",
]
