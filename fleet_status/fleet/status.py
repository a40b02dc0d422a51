"""Status classification and activity filtering.

Two status matchers:

- ``classify_status`` is fuzzy: it normalizes the raw text and buckets it
  into one of the classified statuses via ordered substring rules.
- ``status_equals`` is strict: lowercase equality against a status literal.
"""

import re
from typing import Optional

from fleet_status.config.constants import (
    INACTIVE_MARKERS,
    INACTIVE_STATUSES,
    NO_DRIVER_MARKER,
    OTHER,
    STATUS_RULES,
)
from fleet_status.fleet.truck import TruckRecord

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALPHA_RE = re.compile(r"[^a-z ]")


def raw_status(record: TruckRecord) -> str:
    """Raw status text with surrounding whitespace removed; absent -> "Other"."""
    return (record.status or OTHER).strip() or OTHER


def normalize_status(raw: Optional[str]) -> str:
    """Trim, lowercase, collapse whitespace and drop anything outside [a-z ]."""
    text = (raw or OTHER).strip().lower()
    text = _WHITESPACE_RE.sub(" ", text)
    return _NON_ALPHA_RE.sub("", text)


def classify_status(raw: Optional[str]) -> str:
    """Map a raw status string to one classified status.

    Total: any input, including "" and None, yields exactly one token.
    """
    text = normalize_status(raw)
    for marker, token in STATUS_RULES:
        if marker in text:
            return token
    return OTHER


def status_equals(raw: Optional[str], expected: str) -> bool:
    """Exact (case-insensitive) status literal match."""
    return ((raw or "").strip() or OTHER).lower() == expected.strip().lower()


def is_no_driver(record: TruckRecord) -> bool:
    """Node or no-driver trucks, as listed in the report trailer."""
    status = raw_status(record).lower()
    return status == "node" or NO_DRIVER_MARKER in status


def is_active(record: TruckRecord) -> bool:
    """False for parked/garage/insurance trucks and node/no-driver states."""
    status = raw_status(record).lower()
    if status in INACTIVE_STATUSES:
        return False
    return not any(marker in status for marker in INACTIVE_MARKERS)
