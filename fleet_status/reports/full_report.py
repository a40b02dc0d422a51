"""Long operational report: Djibouti corridor, brand sections, trailers.

Section order is fixed:

1. Header (greeting, date, clock)
2. Djibouti: crossed and ongoing-empty headers always print, then the
   unloading / ongoing / oncoming sub-blocks when non-empty
3. Brand sections (Walia, BGI, Leshato, Habesha, Unilever), each omitted
   when the brand has no active trucks
4. Trailers over the whole fleet: parked, garage, node/no driver, insurance
5. Closing line
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from fleet_status.config.constants import (
    BRAND_CATEGORIES,
    DJIBOUTI,
    GARAGE,
    INSURANCE,
    LABEL_CROSSED,
    LABEL_ONGOING_EMPTY,
    LOADING,
    ONCOMING,
    ONGOING,
    PARKED,
    UNLOADING,
)
from fleet_status.config.schema import ReportLayout
from fleet_status.fleet.djibouti import is_crossed, is_ongoing_empty
from fleet_status.fleet.grouping import filter_category, group_by
from fleet_status.fleet.status import classify_status, is_active, is_no_driver, status_equals
from fleet_status.fleet.truck import TruckRecord
from fleet_status.reports.formatting import (
    arrow_line,
    counted,
    equals_line,
    grouped_lines,
    header_lines,
    join_blocks,
    location,
    member_lines,
    note_line,
    plate,
)

logger = logging.getLogger(__name__)


def _with_status(records: Iterable[TruckRecord], token: str) -> List[TruckRecord]:
    return [r for r in records if classify_status(r.status) == token]


# =============================================================================
# Djibouti
# =============================================================================

def _djibouti_section(records: List[TruckRecord]) -> List[str]:
    active = [r for r in filter_category(records, DJIBOUTI) if is_active(r)]

    crossed = [r for r in active if is_crossed(r)]
    ongoing_empty = [r for r in active if not is_crossed(r) and is_ongoing_empty(r)]
    others = [r for r in active if not is_crossed(r) and not is_ongoing_empty(r)]

    logger.debug(
        f"Djibouti: {len(active)} active, {len(crossed)} crossed, "
        f"{len(ongoing_empty)} ongoing empty, {len(others)} others"
    )

    blocks = [
        [f"*{counted(DJIBOUTI.upper(), len(active))}*"],
        [counted(LABEL_CROSSED, len(crossed))] + member_lines(crossed, arrow_line),
        [counted(LABEL_ONGOING_EMPTY, len(ongoing_empty))] + member_lines(ongoing_empty, arrow_line),
    ]

    if others:
        unloading = _with_status(others, UNLOADING)
        ongoing = _with_status(others, ONGOING)
        oncoming = _with_status(others, ONCOMING)

        blocks.append(grouped_lines(
            group_by(unloading, lambda r: r.current_location),
            lambda loc: f"UNLOADING @ {loc}",
            note_line,
        ))
        blocks.append(grouped_lines(
            group_by(ongoing, lambda r: r.destination),
            lambda dest: f"DJIBOUTI TO {dest}",
            arrow_line,
        ))
        if oncoming:
            blocks.append(
                [counted("ONCOMING TRUCKS", len(oncoming))]
                + grouped_lines(
                    group_by(oncoming, lambda r: r.from_location),
                    lambda loc: f"from {loc}",
                    arrow_line,
                )
            )

    return join_blocks(blocks)


# =============================================================================
# Brands
# =============================================================================

def _brand_section(records: List[TruckRecord], brand: str) -> List[str]:
    """Render one brand, or nothing when it has no active trucks."""
    active = [r for r in filter_category(records, brand) if is_active(r)]
    if not active:
        logger.debug(f"{brand}: no active trucks, section omitted")
        return []

    loading = _with_status(active, LOADING)
    unloading = _with_status(active, UNLOADING)
    ongoing = _with_status(active, ONGOING)
    oncoming = _with_status(active, ONCOMING)

    blocks = [[f"*{counted(brand.upper(), len(active))}*"]]

    blocks.append(grouped_lines(
        group_by(loading, lambda r: r.current_location),
        lambda loc: f"LOADING @ {loc}",
        note_line,
    ))

    if unloading:
        blocks.append([counted("UNLOADING", len(unloading))] + [arrow_line(r) for r in unloading])

    if ongoing:
        # Labelled after the first truck only, even when origins differ.
        origin = location(ongoing[0].from_location).upper()
        blocks.append(
            [counted(f"ONGOING TRUCKS FROM {origin}", len(ongoing))]
            + grouped_lines(
                group_by(ongoing, lambda r: r.destination),
                lambda dest: f"to {dest}",
                arrow_line,
            )
        )

    if oncoming:
        # Same first-truck labelling as the ongoing block.
        target = location(oncoming[0].destination).upper()
        blocks.append(
            [counted(f"ONCOMING TRUCKS TO {target}", len(oncoming))]
            + grouped_lines(
                group_by(oncoming, lambda r: r.from_location),
                lambda loc: f"from {loc}",
                arrow_line,
            )
        )

    logger.debug(
        f"{brand}: {len(active)} active ({len(loading)} loading, {len(unloading)} unloading, "
        f"{len(ongoing)} ongoing, {len(oncoming)} oncoming)"
    )
    return join_blocks(blocks)


# =============================================================================
# Trailers
# =============================================================================

def _trailer_sections(records: List[TruckRecord]) -> List[List[str]]:
    parked = [r for r in records if status_equals(r.status, PARKED)]
    garage = [r for r in records if status_equals(r.status, GARAGE)]
    no_driver = [r for r in records if is_no_driver(r)]
    insurance = [r for r in records if status_equals(r.status, INSURANCE)]

    trailers = [
        ("PARKED TRUCKS", parked, equals_line),
        ("GARAGE TRUCKS", garage, equals_line),
        ("NODE / NO DRIVER TRUCKS", no_driver, equals_line),
        ("INSURANCE TRUCKS", insurance, plate),
    ]
    return [
        [f"*{counted(title, len(members))}*"] + [line_fn(r) for r in members]
        for title, members, line_fn in trailers
        if members
    ]


def build_full_report(
    records: Iterable[TruckRecord],
    now: datetime,
    layout: Optional[ReportLayout] = None,
) -> str:
    """Render the full fleet status report.

    Args:
        records: Truck snapshot; iteration order drives group order.
        now: Report timestamp (greeting, date and clock).
        layout: Fixed texts and glyphs, defaults to ReportLayout.default().

    Returns:
        The report as one newline-joined string.
    """
    layout = layout or ReportLayout.default()
    records = list(records)

    sections = [_djibouti_section(records)]
    sections.extend(_brand_section(records, brand) for brand in BRAND_CATEGORIES)
    sections.extend(_trailer_sections(records))

    lines = header_lines(now, layout.full_title, layout)
    for section in sections:
        if section:
            lines.extend(section)
            lines.append(layout.separator)
    lines.append(layout.closing_line)

    logger.debug(f"Full report rendered for {len(records)} trucks")
    return "\n".join(lines)
