"""Identifier rules shared by bottles and shipments.

Identifiers are opaque strings, measured in UTF-8 bytes so that the limit
matches what the underlying key-value store accepts.
"""

import json

from protean.exceptions import ValidationError

from custody.errors import IdMissing, IdTooLong

MAX_ID_LENGTH = 36


def validate_identifier(value: str | None) -> str:
    """Return ``value`` unchanged, or raise IdMissing / IdTooLong."""
    if not value:
        raise IdMissing()
    if len(value.encode("utf-8")) > MAX_ID_LENGTH:
        raise IdTooLong(f"Identifier '{value[:12]}...' exceeds {MAX_ID_LENGTH} bytes")
    return value


def parse_id_list(raw) -> list[str]:
    """Decode a JSON-encoded list of identifiers carried by a command."""
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            raise ValidationError({"bottle_ids": ["Bottle ids must be a JSON list"]}) from None
    if not isinstance(raw, list):
        raise ValidationError({"bottle_ids": ["Bottle ids must be a list"]})
    return [str(i) for i in raw]
