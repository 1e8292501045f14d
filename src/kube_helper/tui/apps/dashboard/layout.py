"""Panel layout engine.

Pure functions that decide which lines of a panel are visible, where the
scroll offset lands and how the title's page indicator reads, for a panel
of a given height. A composed panel block never exceeds its declared height.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Rows a panel spends on border (2), padding (2) and title (1)
FIXED_CHROME = 5

FOOTER_HEIGHT = 6
PODS_PANEL_HEIGHT = 12
PODS_PANEL_MAX_LINES = PODS_PANEL_HEIGHT - FIXED_CHROME
MIN_DETAIL_HEIGHT = 5
DEFAULT_DETAIL_MAX_LINES = 20

HEADER_PREFIX = "NAME"


@dataclass(frozen=True)
class PanelLayout:
    """Visible portion of a panel.

    Attributes:
        title: Title including the page indicator when content overflows.
        lines: Visible content lines.
        scroll: Clamped scroll offset the slice starts at.
        visible: Effective number of content rows.
        page: (current, total) page numbers, or None if everything fits.
        highlight: Index into ``lines`` of the highlighted line, if any.
    """

    title: str
    lines: list[str]
    scroll: int
    visible: int
    page: tuple[int, int] | None = None
    highlight: int | None = None


@dataclass(frozen=True)
class PanelHeights:
    pods: int
    detail: int


def panel_heights(terminal_height: int) -> PanelHeights:
    """Split the terminal between the pods panel and the detail panel."""
    available = terminal_height - FOOTER_HEIGHT
    return PanelHeights(
        pods=PODS_PANEL_HEIGHT,
        detail=max(MIN_DETAIL_HEIGHT, available - PODS_PANEL_HEIGHT),
    )


def detail_max_lines(terminal_height: int) -> int:
    """Line budget for log and describe panels: the rows their block renders."""
    if terminal_height <= 0:
        return DEFAULT_DETAIL_MAX_LINES
    return available_rows(panel_heights(terminal_height).detail)


def available_rows(max_height: int) -> int:
    """Content rows left once chrome is subtracted (at least one)."""
    return max(1, max_height - FIXED_CHROME)


def is_header(line: str) -> bool:
    return line.strip().startswith(HEADER_PREFIX)


def first_field(line: str) -> str | None:
    fields = line.split()
    return fields[0] if fields else None


def names_match(name: str, target: str) -> bool:
    """Exact match, or either name is a prefix of the other."""
    return name == target or name.startswith(target) or target.startswith(name)


def find_highlight(content: Sequence[str], target: str) -> int | None:
    """Index of the line naming ``target``.

    An exact match wins over prefix matches; among prefix matches the last
    one wins.
    """
    found = None
    for i, line in enumerate(content):
        if not line.strip() or is_header(line):
            continue
        name = first_field(line)
        if name == target:
            return i
        if name is not None and names_match(name, target):
            found = i
    return found


def recenter(scroll: int, index: int, max_height: int, content: Sequence[str]) -> int:
    """Scroll so that line ``index`` is visible, roughly centred."""
    rows = available_rows(max_height)
    if scroll <= index < scroll + rows:
        return scroll
    header = next((i for i, line in enumerate(content) if is_header(line)), 0)
    offset = max(0, index - rows // 2)
    if offset <= header:
        offset = header + 1
    return offset


def clamp_scroll(scroll: int, total: int, visible: int) -> int:
    return min(max(0, scroll), max(0, total - visible))


def page_indicator(scroll: int, total: int, visible: int) -> tuple[int, int] | None:
    """Return (current, total) pages, or None when the content fits."""
    if total <= visible:
        return None
    pages = -(-total // visible)
    return min(scroll // visible + 1, pages), pages


def layout_panel(
    title: str,
    content: Sequence[str],
    max_height: int,
    scroll: int,
    max_lines: int,
    highlight: str | None = None,
) -> PanelLayout:
    """Compute the visible slice of a panel.

    Args:
        title: Panel title.
        content: All content lines.
        max_height: Rows allocated to the panel, chrome included.
        scroll: Requested scroll offset.
        max_lines: The panel's soft visible-line budget.
        highlight: Name to mark in the list (pods panel only).

    Returns:
        The computed layout.
    """
    rows = available_rows(max_height)
    visible = max(1, min(max_lines, rows))
    total = len(content)

    marked = None
    if highlight:
        marked = find_highlight(content, highlight)
        if marked is not None:
            scroll = recenter(scroll, marked, max_height, content)

    scroll = clamp_scroll(scroll, total, visible)
    lines = list(content[scroll : scroll + visible])

    page = page_indicator(scroll, total, visible)
    if page is not None:
        title = f"{title} ({page[0]}/{page[1]})"

    local = None
    if marked is not None and scroll <= marked < scroll + len(lines):
        local = marked - scroll

    return PanelLayout(
        title=title,
        lines=lines,
        scroll=scroll,
        visible=visible,
        page=page,
        highlight=local,
    )


def compose_block(layout: PanelLayout, max_height: int) -> list[str]:
    """Title, blank separator and content, cut to exactly ``max_height`` rows."""
    block = [layout.title, "", *layout.lines]
    return block[: max(0, max_height)]
