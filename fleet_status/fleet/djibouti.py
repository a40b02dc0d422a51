"""Djibouti corridor predicates shared by the full and summary reports."""

from fleet_status.config.constants import DJIBOUTI, GALAFI_MARKER, ONGOING
from fleet_status.fleet.status import classify_status
from fleet_status.fleet.truck import TruckRecord


def heading_to_djibouti(record: TruckRecord) -> bool:
    return (record.destination or "").strip().lower() == DJIBOUTI.lower()


def via_galafi(record: TruckRecord) -> bool:
    return GALAFI_MARKER in (record.note or "").lower()


def is_crossed(record: TruckRecord) -> bool:
    """Empty truck already crossed at Galafi, whatever its status says."""
    return heading_to_djibouti(record) and via_galafi(record)


def is_ongoing_empty(record: TruckRecord) -> bool:
    """Ongoing empty truck on its way to Djibouti, not yet past Galafi."""
    return (
        classify_status(record.status) == ONGOING
        and heading_to_djibouti(record)
        and not via_galafi(record)
    )
