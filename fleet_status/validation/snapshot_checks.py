"""Snapshot sanity checks run before reports are distributed."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List

from fleet_status.config.constants import OTHER, SUMMARY_CATEGORIES, UNCATEGORIZED
from fleet_status.fleet.grouping import category_of
from fleet_status.fleet.status import classify_status, raw_status
from fleet_status.fleet.truck import TruckRecord

logger = logging.getLogger(__name__)


@dataclass
class SnapshotIssue:
    check: str
    plate_no: str
    severity: str     # "error" or "warning"
    message: str


@dataclass
class ValidationReport:
    issues: List[SnapshotIssue] = field(default_factory=list)
    n_records: int = 0

    @property
    def errors(self) -> List[SnapshotIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> List[SnapshotIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def passed(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        lines = [
            f"Snapshot: {self.n_records} trucks, "
            f"{len(self.errors)} errors, {len(self.warnings)} warnings"
        ]
        for issue in self.issues:
            lines.append(
                f"  [{issue.severity.upper()}] {issue.check}/{issue.plate_no}: {issue.message}"
            )
        return "\n".join(lines)


def validate_snapshot(records: Iterable[TruckRecord]) -> ValidationReport:
    """Flag snapshot problems that would make the reports misleading.

    Errors: missing plate numbers, duplicate plate numbers.
    Warnings: categories outside the known list, statuses that classify as Other.
    """
    records = list(records)
    report = ValidationReport(n_records=len(records))

    if not records:
        logger.warning("Snapshot is empty")
        return report

    known_categories = {c.lower() for c in SUMMARY_CATEGORIES}
    plate_counts = Counter(r.plate_no for r in records if r.plate_no)

    for index, record in enumerate(records):
        plate_no = record.plate_no or f"row {index}"

        if not record.plate_no:
            report.issues.append(SnapshotIssue(
                "plate", plate_no, "error", "missing plate number",
            ))

        category = category_of(record)
        if category == UNCATEGORIZED:
            report.issues.append(SnapshotIssue(
                "category", plate_no, "warning", "no category",
            ))
        elif category.lower() not in known_categories:
            report.issues.append(SnapshotIssue(
                "category", plate_no, "warning", f"unknown category '{category}'",
            ))

        if classify_status(record.status) == OTHER:
            report.issues.append(SnapshotIssue(
                "status", plate_no, "warning", f"unrecognized status '{raw_status(record)}'",
            ))

    for plate_no, count in plate_counts.items():
        if count > 1:
            report.issues.append(SnapshotIssue(
                "plate", plate_no, "error", f"plate number appears {count} times",
            ))

    return report
