"""Condensed report: status breakdown and active category breakdown."""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from fleet_status.config.constants import (
    DJIBOUTI,
    LABEL_CROSSED,
    LABEL_DJIBOUTI_TO,
    LABEL_LOADING,
    LABEL_ONCOMING_TO,
    LABEL_ONGOING_EMPTY,
    LABEL_ONGOING_FROM,
    LABEL_UNLOADING,
    LOADING,
    ONCOMING,
    ONGOING,
    SUMMARY_CATEGORIES,
    UNLOADING,
)
from fleet_status.config.schema import ReportLayout
from fleet_status.fleet.djibouti import is_crossed, is_ongoing_empty
from fleet_status.fleet.grouping import category_of, group_by, in_category
from fleet_status.fleet.status import classify_status, is_active, raw_status, status_equals
from fleet_status.fleet.truck import TruckRecord
from fleet_status.reports.formatting import header_lines, join_blocks, tree_lines

logger = logging.getLogger(__name__)


def summary_label(record: TruckRecord) -> Optional[str]:
    """Breakdown label of a truck, or None when it is not counted.

    The first matching rule wins; Djibouti trucks use the corridor labels.
    """
    status = classify_status(record.status)

    if in_category(record, DJIBOUTI):
        if is_crossed(record):
            return LABEL_CROSSED
        if is_ongoing_empty(record):
            return LABEL_ONGOING_EMPTY
        if status == ONGOING:
            return LABEL_DJIBOUTI_TO
        if status == ONCOMING:
            return LABEL_ONCOMING_TO
    else:
        if status == ONGOING:
            return LABEL_ONGOING_FROM
        if status == ONCOMING:
            return LABEL_ONCOMING_TO

    if status_equals(record.status, LOADING):
        return LABEL_LOADING
    if status_equals(record.status, UNLOADING):
        return LABEL_UNLOADING
    return None


def distinct_statuses(records: Iterable[TruckRecord]) -> List[str]:
    """Observed raw statuses, title-cased, case-insensitively de-duplicated."""
    names: Dict[str, str] = {}
    for record in records:
        status = raw_status(record)
        names.setdefault(status.lower(), status.title())
    return list(names.values())


def summary_categories(records: Iterable[TruckRecord]) -> List[str]:
    """Fixed categories first, then the ones discovered in the data."""
    names = {c.lower(): c for c in SUMMARY_CATEGORIES}
    for record in records:
        category = category_of(record)
        names.setdefault(category.lower(), category)
    return list(names.values())


def _status_breakdown(records: List[TruckRecord], layout: ReportLayout) -> List[str]:
    blocks = []
    for status in distinct_statuses(records):
        matching = [r for r in records if status_equals(r.status, status)]
        if not matching:
            continue
        by_category = group_by(matching, category_of)
        entries = [(category, len(members)) for category, members in by_category.items()]
        blocks.append([f"{status}: {len(matching)}"] + tree_lines(entries, layout))

    if not blocks:
        return []
    return ["*GENERAL STATUS BREAKDOWN*"] + join_blocks(blocks)


def _category_breakdown(records: List[TruckRecord], layout: ReportLayout) -> List[str]:
    active = [r for r in records if is_active(r)]

    blocks = []
    for category in summary_categories(records):
        labeled = [
            r for r in active
            if in_category(r, category) and summary_label(r) is not None
        ]
        if not labeled:
            continue
        by_label = group_by(labeled, summary_label)
        entries = [(label, len(members)) for label, members in by_label.items()]
        blocks.append([f"{category}: {len(labeled)}"] + tree_lines(entries, layout))

    if not blocks:
        return []
    return ["*ACTIVE CATEGORY BREAKDOWN*"] + join_blocks(blocks)


def build_summary_report(
    records: Iterable[TruckRecord],
    now: datetime,
    layout: Optional[ReportLayout] = None,
) -> str:
    """Render the summary report as one newline-joined string."""
    layout = layout or ReportLayout.default()
    records = list(records)

    lines = header_lines(now, layout.summary_title, layout)
    for section in (_status_breakdown(records, layout), _category_breakdown(records, layout)):
        if section:
            lines.extend(section)
            lines.append(layout.separator)
    lines.append(layout.closing_line)

    logger.debug(f"Summary report rendered for {len(records)} trucks")
    return "\n".join(lines)
