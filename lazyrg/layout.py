"""Row and column budgets for the fixed window chrome."""

from __future__ import annotations

from dataclasses import dataclass

TOP_ROWS = 6  # title and tabs with margins
HELP_ROWS = 2
STATUS_ROWS = 1
BORDER_ROWS = 2
EXPANDED_HELP_EXTRA_ROWS = 4

INPUT_WIDTH_MARGIN = 30
LIST_WIDTH_MARGIN = 4
VIEWER_WIDTH_MARGIN = 8  # borders and padding


@dataclass(frozen=True)
class Viewports:
    input_width: int
    list_width: int
    list_height: int
    viewer_width: int
    viewer_height: int


def chrome_rows(help_expanded: bool) -> int:
    """Rows reserved for title, tabs, status, help, and borders."""
    rows = TOP_ROWS + HELP_ROWS + STATUS_ROWS + BORDER_ROWS
    if help_expanded:
        rows += EXPANDED_HELP_EXTRA_ROWS
    return rows


def compute_viewports(width: int, height: int, help_expanded: bool) -> Viewports:
    """Size widgets for a ``width`` x ``height`` window; never negative."""
    body_rows = max(0, height - chrome_rows(help_expanded))
    return Viewports(
        input_width=max(1, width - INPUT_WIDTH_MARGIN),
        list_width=max(0, width - LIST_WIDTH_MARGIN),
        list_height=body_rows,
        viewer_width=max(0, width - VIEWER_WIDTH_MARGIN),
        viewer_height=body_rows,
    )
