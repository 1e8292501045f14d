"""Custom widgets for the dashboard TUI.

Provides the bordered panel box used for the pods panel and the detail
(describe/log) panel.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.widgets import Static

from kube_helper.tui.theme import Colors


class PanelBox(Static):
    """Rounded, bordered block showing pre-composed panel markup.

    The box height is fixed by the screen on every render so that a panel
    never grows past the rows allocated to it.
    """

    DEFAULT_CSS = f"""
    PanelBox {{
        width: 100%;
        border: round {Colors.BORDER};
        padding: 0 2;
        overflow: hidden hidden;
    }}
    PanelBox.-active {{
        border: round {Colors.BORDER_ACTIVE};
    }}
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize an empty panel box.

        Args:
            **kwargs: Additional widget arguments.
        """
        super().__init__("", **kwargs)

    def show(self, markup: str, height: int, active: bool = False) -> None:
        """Replace the box content.

        Args:
            markup: Rich markup, at most ``height - 2`` lines.
            height: Total rows for the box, border included.
            active: Draw the highlighted border.
        """
        self.styles.height = height
        self.set_class(active, "-active")
        self.update(Text.from_markup(markup))
