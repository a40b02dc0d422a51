"""TruckRecord dataclass representing one truck in a fleet snapshot."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from fleet_status.config.constants import COLUMN_ALIASES, SNAPSHOT_COLUMNS


def _clean(value: Any) -> Optional[str]:
    """Blank strings, None and NaN all mean "not set"."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class TruckRecord:
    plate_no: Optional[str]
    category: Optional[str] = None
    status: Optional[str] = None
    current_location: Optional[str] = None
    from_location: Optional[str] = None
    destination: Optional[str] = None
    note: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> TruckRecord:
        """Build a record from a store row (snake_case) or camelCase dict.

        Unknown keys are ignored.
        """
        values = {}
        for key, value in row.items():
            column = COLUMN_ALIASES.get(key, key)
            if column in SNAPSHOT_COLUMNS:
                values[column] = _clean(value)
        values.setdefault("plate_no", None)
        return cls(**values)

    def to_dict(self) -> dict:
        return {column: getattr(self, column) for column in SNAPSHOT_COLUMNS}
