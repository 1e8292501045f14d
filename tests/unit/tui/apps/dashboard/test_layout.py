"""Unit tests for the panel layout engine."""

from __future__ import annotations

import pytest

from kube_helper.tui.apps.dashboard.layout import (
    DEFAULT_DETAIL_MAX_LINES,
    PODS_PANEL_MAX_LINES,
    available_rows,
    clamp_scroll,
    compose_block,
    detail_max_lines,
    find_highlight,
    layout_panel,
    page_indicator,
    panel_heights,
    recenter,
)

POD_LIST = ["NAME       READY   STATUS"] + [f"pod-{i}   1/1   Running" for i in range(20)]


@pytest.mark.unit
class TestPanelHeights:
    """Tests for splitting the terminal between panels."""

    def test_regular_terminal(self) -> None:
        heights = panel_heights(40)

        assert heights.pods == 12
        assert heights.detail == 22

    def test_tiny_terminal_keeps_minimum_detail(self) -> None:
        assert panel_heights(10).detail == 5

    def test_pods_budget(self) -> None:
        assert PODS_PANEL_MAX_LINES == 7

    def test_detail_max_lines(self) -> None:
        assert detail_max_lines(40) == 17

    def test_detail_max_lines_unknown_size(self) -> None:
        """Before the first resize the default budget applies."""
        assert detail_max_lines(0) == DEFAULT_DETAIL_MAX_LINES

    def test_available_rows_at_least_one(self) -> None:
        assert available_rows(3) == 1
        assert available_rows(12) == 7


@pytest.mark.unit
class TestLayoutPanel:
    """Tests for slicing and titling a panel."""

    def test_content_fits(self) -> None:
        layout = layout_panel("Pods", ["a", "b"], 12, 0, 7)

        assert layout.title == "Pods"
        assert layout.lines == ["a", "b"]
        assert layout.page is None

    def test_page_indicator_in_title(self) -> None:
        content = [f"line {i}" for i in range(30)]

        layout = layout_panel("T", content, 12, 0, 7)

        assert layout.title == "T (1/5)"
        assert layout.visible == 7
        assert layout.lines == content[:7]

    def test_scroll_clamped_at_end(self) -> None:
        content = [f"line {i}" for i in range(30)]

        layout = layout_panel("T", content, 12, 100, 7)

        assert layout.scroll == 23
        assert layout.title == "T (4/5)"
        assert layout.lines == content[23:]

    def test_negative_scroll(self) -> None:
        layout = layout_panel("T", [str(i) for i in range(30)], 12, -4, 7)

        assert layout.scroll == 0

    def test_hard_limit_wins_over_budget(self) -> None:
        """A generous budget still cannot exceed the rows of the panel."""
        layout = layout_panel("T", [str(i) for i in range(30)], 10, 0, 20)

        assert layout.visible == 5
        assert len(layout.lines) == 5

    def test_budget_wins_when_smaller(self) -> None:
        layout = layout_panel("T", [str(i) for i in range(30)], 40, 0, 3)

        assert layout.visible == 3

    def test_highlight_recentres(self) -> None:
        layout = layout_panel("Pods", POD_LIST, 12, 0, 7, highlight="pod-15")

        assert layout.scroll == 13
        assert layout.highlight == 3
        assert layout.lines[3].startswith("pod-15")

    def test_highlight_visible_keeps_scroll(self) -> None:
        layout = layout_panel("Pods", POD_LIST, 12, 0, 7, highlight="pod-2")

        assert layout.scroll == 0
        assert layout.highlight == 3

    def test_unknown_highlight(self) -> None:
        layout = layout_panel("Pods", POD_LIST, 12, 4, 7, highlight="missing")

        assert layout.scroll == 4
        assert layout.highlight is None


@pytest.mark.unit
class TestHighlightSearch:
    """Tests for locating the highlighted pod line."""

    def test_exact_match_beats_prefix(self) -> None:
        content = ["NAME", "web-10   1/1", "web-1   1/1"]

        assert find_highlight(content, "web-1") == 2

    def test_prefix_match(self) -> None:
        content = ["NAME", "web-1-abc   1/1"]

        assert find_highlight(content, "web-1") == 1

    def test_header_and_blank_skipped(self) -> None:
        assert find_highlight(["NAME", "", "  "], "NAME") is None

    def test_no_match(self) -> None:
        assert find_highlight(["NAME", "db-0 1/1"], "web") is None

    def test_recenter_skips_header(self) -> None:
        """The header line is never the first visible row after recentring."""
        assert recenter(10, 1, 12, POD_LIST) == 1

    def test_recenter_noop_when_visible(self) -> None:
        assert recenter(2, 5, 12, POD_LIST) == 2


@pytest.mark.unit
class TestHelpers:
    """Tests for the small arithmetic helpers."""

    @pytest.mark.parametrize(
        ("scroll", "total", "visible", "expected"),
        [(5, 10, 7, 3), (-1, 10, 7, 0), (2, 3, 7, 0), (1, 10, 7, 1)],
    )
    def test_clamp_scroll(self, scroll: int, total: int, visible: int, expected: int) -> None:
        assert clamp_scroll(scroll, total, visible) == expected

    def test_page_indicator(self) -> None:
        assert page_indicator(0, 5, 7) is None
        assert page_indicator(7, 14, 7) == (2, 2)
        assert page_indicator(13, 14, 7) == (2, 2)

    def test_compose_block_truncates(self) -> None:
        layout = layout_panel("T", [str(i) for i in range(10)], 40, 0, 10)

        assert compose_block(layout, 4) == ["T", "", "0", "1"]

    def test_compose_block_full(self) -> None:
        layout = layout_panel("T", ["a"], 12, 0, 7)

        assert compose_block(layout, 12) == ["T", "", "a"]

    def test_compose_block_zero_height(self) -> None:
        layout = layout_panel("T", ["a"], 12, 0, 7)

        assert compose_block(layout, 0) == []
