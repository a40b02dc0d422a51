"""Line-level rendering primitives shared by both reports."""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from fleet_status.config.constants import EMPTY_PLACEHOLDER, MISSING_LOCATION, MISSING_PLATE
from fleet_status.config.schema import ReportLayout
from fleet_status.fleet.truck import TruckRecord


def greeting_word(now: datetime, layout: ReportLayout) -> str:
    return "Morning" if now.hour < layout.afternoon_from_hour else "Afternoon"


def header_lines(now: datetime, title: str, layout: ReportLayout) -> List[str]:
    """Greeting, title, date (DD/MM/YYYY) and 12-hour clock."""
    return [
        layout.greeting_template.format(greeting=greeting_word(now, layout)),
        "",
        f"*{title}*",
        f"Date: {now.strftime(layout.date_format)}",
        f"Time: {now.strftime(layout.clock_format)}",
        layout.separator,
    ]


def counted(title: str, count: int) -> str:
    return f"{title} ({count})"


def _join(*parts: Optional[str]) -> str:
    return " ".join(p for p in parts if p)


def plate(record: TruckRecord) -> str:
    return record.plate_no or MISSING_PLATE


def location(value: Optional[str]) -> str:
    return value or MISSING_LOCATION


def arrow_line(record: TruckRecord) -> str:
    """``plate ==> current_location note``"""
    return _join(plate(record), "==>", location(record.current_location), record.note)


def note_line(record: TruckRecord) -> str:
    """``plate note``"""
    return _join(plate(record), record.note)


def equals_line(record: TruckRecord) -> str:
    """``plate = note``"""
    return f"{plate(record)} = {record.note or ''}".rstrip()


def member_lines(records: Sequence[TruckRecord], line_fn) -> List[str]:
    """One line per record, or the "-" placeholder when there are none."""
    if not records:
        return [EMPTY_PLACEHOLDER]
    return [line_fn(r) for r in records]


def tree_lines(entries: Sequence[Tuple[str, int]], layout: ReportLayout) -> List[str]:
    """Indented ``name: count`` entries, the last one closing the branch."""
    lines = []
    for i, (name, count) in enumerate(entries):
        glyph = layout.tree_last if i == len(entries) - 1 else layout.tree_branch
        lines.append(f"   {glyph} {name}: {count}")
    return lines


def grouped_lines(groups, header_fn, line_fn) -> List[str]:
    """Counted sub-header per group followed by its member lines."""
    lines = []
    for key, members in groups.items():
        lines.append(counted(header_fn(key), len(members)))
        lines.extend(line_fn(r) for r in members)
    return lines


def join_blocks(blocks: Sequence[List[str]], spacer: str = "") -> List[str]:
    """Concatenate the non-empty blocks, with a spacer line between them."""
    lines: List[str] = []
    for block in blocks:
        if not block:
            continue
        if lines:
            lines.append(spacer)
        lines.extend(block)
    return lines
