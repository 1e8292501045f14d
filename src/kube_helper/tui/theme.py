"""Theme constants and style utilities for TUI components.

Colors are xterm-256 indices so the dashboard looks the same in any
terminal theme.

Usage:
    from kube_helper.tui.theme import Colors, Styles

    # Use colors in DEFAULT_CSS
    DEFAULT_CSS = f'''
    PanelBox {{ border: round {Colors.BORDER}; }}
    '''

    # Use style helpers
    styled_text = Styles.error("Error: forbidden")
"""

from __future__ import annotations


class Colors:
    """Color constants for TUI theming.

    Rich markup takes the ``color(N)`` form; Textual CSS takes ``ansi_color``
    names, so the CSS variants are spelled out separately.
    """

    TITLE = "color(62)"
    SELECTED_FG = "color(229)"
    SELECTED_BG = "color(57)"
    NORMAL = "color(245)"
    ERROR = "color(196)"
    INFO = "color(110)"

    # Textual CSS
    BORDER = "#5f5fd7"  # xterm 62
    BORDER_ACTIVE = "#ffffaf"  # xterm 229


class Styles:
    """Style helper functions for Rich markup.

    These functions wrap text in Rich markup tags. Callers escape untrusted
    text before styling it.
    """

    @staticmethod
    def title(text: str) -> str:
        """Style text as a title (bold purple)."""
        return f"[bold {Colors.TITLE}]{text}[/]"

    @staticmethod
    def selected(text: str) -> str:
        """Style text as the selected entry (yellow on purple)."""
        return f"[{Colors.SELECTED_FG} on {Colors.SELECTED_BG}]{text}[/]"

    @staticmethod
    def normal(text: str) -> str:
        """Style text as an unselected entry (grey)."""
        return f"[{Colors.NORMAL}]{text}[/]"

    @staticmethod
    def error(text: str) -> str:
        """Style text as error (bold red)."""
        return f"[bold {Colors.ERROR}]{text}[/]"

    @staticmethod
    def info(text: str) -> str:
        """Style text as information (bold blue)."""
        return f"[bold {Colors.INFO}]{text}[/]"

    @staticmethod
    def muted(text: str) -> str:
        """Style text as muted (dim)."""
        return f"[dim]{text}[/dim]"
