"""Unit tests for TUI theme module.

Tests the Colors constants and Styles helper methods.
"""

from __future__ import annotations

import pytest
from rich.text import Text

from kube_helper.tui.theme import Colors, Styles


class TestColors:
    """Tests for Colors class constants."""

    @pytest.mark.unit
    def test_markup_colors(self) -> None:
        """Markup colors are xterm-256 indices."""
        assert Colors.TITLE == "color(62)"
        assert Colors.SELECTED_FG == "color(229)"
        assert Colors.SELECTED_BG == "color(57)"
        assert Colors.NORMAL == "color(245)"
        assert Colors.ERROR == "color(196)"
        assert Colors.INFO == "color(110)"

    @pytest.mark.unit
    def test_border_colors_are_css_hex(self) -> None:
        """Border colors can be used in Textual CSS."""
        assert Colors.BORDER.startswith("#")
        assert Colors.BORDER_ACTIVE.startswith("#")


class TestStyles:
    """Tests for Styles helper methods."""

    @pytest.mark.unit
    def test_title(self) -> None:
        assert Styles.title("Pods") == "[bold color(62)]Pods[/]"

    @pytest.mark.unit
    def test_selected(self) -> None:
        assert Styles.selected("team-a") == "[color(229) on color(57)]team-a[/]"

    @pytest.mark.unit
    def test_normal(self) -> None:
        assert Styles.normal("team-b") == "[color(245)]team-b[/]"

    @pytest.mark.unit
    def test_error(self) -> None:
        assert Styles.error("Error: boom") == "[bold color(196)]Error: boom[/]"

    @pytest.mark.unit
    def test_info(self) -> None:
        assert Styles.info("Deleting...") == "[bold color(110)]Deleting...[/]"

    @pytest.mark.unit
    def test_muted(self) -> None:
        assert Styles.muted("Page 1/2") == "[dim]Page 1/2[/dim]"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "styled",
        [
            Styles.title("x"),
            Styles.selected("x"),
            Styles.normal("x"),
            Styles.error("x"),
            Styles.info("x"),
            Styles.muted("x"),
        ],
    )
    def test_valid_rich_markup(self, styled: str) -> None:
        """Every helper produces markup Rich can parse."""
        assert Text.from_markup(styled).plain == "x"
