"""Terminal User Interface components for kube-helper.

Usage:
    from kube_helper.tui import BaseScreen, Colors, Styles
    from kube_helper.tui.apps.dashboard import KubeHelperApp
"""

from kube_helper.tui.base import BaseScreen
from kube_helper.tui.theme import Colors, Styles

__all__ = [
    "BaseScreen",
    "Colors",
    "Styles",
]
