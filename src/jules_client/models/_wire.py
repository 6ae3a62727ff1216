# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Helpers shared by the record models for the JSON wire format."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_RFC3339_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))?(?P<tz>Z|z|[+-]\d{2}:\d{2})$"
)


def _parse_timestamp(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp such as ``2024-05-01T10:00:00.123456789Z``."""
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    m = _RFC3339_RE.match(value)
    if not m:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")
    base = m.group("base").replace("t", "T")
    # datetime only keeps microseconds
    frac = (m.group("frac") or "")[:6].ljust(6, "0")
    if base.endswith(":60"):
        # Leap second, clamped to the last representable instant
        base, frac = base[:-2] + "59", "999999"
    tz = m.group("tz")
    tz = "+00:00" if tz in ("Z", "z") else tz
    return datetime.fromisoformat(f"{base}.{frac}{tz}")


def _parse_optional_timestamp(value: Any) -> Optional[datetime]:
    return None if value is None else _parse_timestamp(value)


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _require(data: Dict[str, Any], key: str) -> Any:
    """Return ``data[key]``; raise KeyError if the field is missing or null."""
    value = data.get(key)
    if value is None:
        raise KeyError(key)
    return value


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value


def _expect_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _drop_none(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in payload.items() if v is not None}
