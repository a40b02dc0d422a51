"""Dataclass configuration for report rendering."""

from __future__ import annotations

from dataclasses import dataclass

from fleet_status.config.constants import (
    AFTERNOON_FROM_HOUR,
    CLOCK_FORMAT,
    CLOSING_LINE,
    DATE_FORMAT,
    FULL_REPORT_TITLE,
    GREETING_TEMPLATE,
    SECTION_SEPARATOR,
    SUMMARY_REPORT_TITLE,
    TREE_BRANCH,
    TREE_LAST,
)


@dataclass(frozen=True)
class ReportLayout:
    """Fixed texts and glyphs shared by both report builders."""

    greeting_template: str = GREETING_TEMPLATE   # "{greeting}" -> Morning/Afternoon
    full_title: str = FULL_REPORT_TITLE
    summary_title: str = SUMMARY_REPORT_TITLE
    date_format: str = DATE_FORMAT               # DD/MM/YYYY
    clock_format: str = CLOCK_FORMAT             # HH:MM AM/PM
    afternoon_from_hour: int = AFTERNOON_FROM_HOUR
    separator: str = SECTION_SEPARATOR
    closing_line: str = CLOSING_LINE
    tree_branch: str = TREE_BRANCH
    tree_last: str = TREE_LAST

    @classmethod
    def default(cls) -> ReportLayout:
        return cls()
