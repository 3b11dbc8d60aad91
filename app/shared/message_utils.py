from __future__ import annotations

from typing import Any, List, Optional

from models.a2a import A2AMessage


def extract_text_parts(message: A2AMessage) -> List[str]:
    """Return all non-empty text payloads from an A2A message."""
    return [
        part.text.strip()
        for part in message.parts
        if part.kind == "text" and part.text and part.text.strip()
    ]


def extract_query(message: A2AMessage) -> str:
    return " ".join(extract_text_parts(message)).strip()


def get_metadata_value(message: A2AMessage, key: str, default: Any = None) -> Any:
    """Fetch a metadata field from a message safely."""
    metadata = message.metadata or {}
    return metadata.get(key, default)


def get_metadata_bool(message: A2AMessage, key: str) -> Optional[bool]:
    value = get_metadata_value(message, key)
    if value is None or isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "12h"}:
        return True
    if text in {"0", "false", "no", "24h"}:
        return False
    return None
