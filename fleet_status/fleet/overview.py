"""Dashboard counters: classified status totals, category totals, chips."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from fleet_status.config.constants import CHIP_CATEGORIES, CLASSIFIED_STATUSES
from fleet_status.fleet.grouping import category_of
from fleet_status.fleet.status import classify_status
from fleet_status.fleet.truck import TruckRecord


@dataclass
class FleetOverview:
    total: int = 0
    status_counts: Dict[str, int] = field(default_factory=dict)
    category_counts: Dict[str, int] = field(default_factory=dict)
    chip_counts: List[Tuple[str, int]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "status_counts": dict(self.status_counts),
            "category_counts": dict(self.category_counts),
            "chips": [{"label": label, "count": count} for label, count in self.chip_counts],
        }


def summarize_fleet(records: Iterable[TruckRecord]) -> FleetOverview:
    """Count trucks per classified status and per category.

    Every classified status is present (zero-filled, canonical order);
    categories appear in first-seen order, exact (trimmed) spelling.
    """
    records = list(records)
    status_counts = {status: 0 for status in CLASSIFIED_STATUSES}
    category_counts: Dict[str, int] = {}

    for record in records:
        status_counts[classify_status(record.status)] += 1
        category = category_of(record)
        category_counts[category] = category_counts.get(category, 0) + 1

    chip_counts = [
        (label, len(records) if key is None else category_counts.get(key, 0))
        for key, label in CHIP_CATEGORIES
    ]

    return FleetOverview(
        total=len(records),
        status_counts=status_counts,
        category_counts=category_counts,
        chip_counts=chip_counts,
    )
