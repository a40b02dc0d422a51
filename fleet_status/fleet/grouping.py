"""Insertion-ordered grouping and category helpers."""

from typing import Callable, Dict, Iterable, List, Optional

from fleet_status.config.constants import UNCATEGORIZED, UNKNOWN_KEY
from fleet_status.fleet.truck import TruckRecord

# Key order is first occurrence; bucket order is source order.
OrderedGroup = Dict[str, List[TruckRecord]]


def group_by(
    records: Iterable[TruckRecord],
    key_fn: Callable[[TruckRecord], Optional[str]],
) -> OrderedGroup:
    """Group records by a derived key without ever sorting.

    Empty or missing keys fall into the "Unknown" bucket.
    """
    groups: OrderedGroup = {}
    for record in records:
        key = (key_fn(record) or "").strip() or UNKNOWN_KEY
        groups.setdefault(key, []).append(record)
    return groups


def category_of(record: TruckRecord) -> str:
    return (record.category or "").strip() or UNCATEGORIZED


def in_category(record: TruckRecord, category: str) -> bool:
    """Case-insensitive exact category match."""
    return category_of(record).lower() == category.lower()


def filter_category(records: Iterable[TruckRecord], category: str) -> List[TruckRecord]:
    return [r for r in records if in_category(r, category)]
