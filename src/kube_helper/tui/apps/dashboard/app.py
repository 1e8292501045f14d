"""Main Textual application for the Kubernetes namespace dashboard.

This module provides the KubeHelperApp, the entry point for the
interactive dashboard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App
from textual.binding import Binding

from kube_helper.core.config import DashboardConfig
from kube_helper.tui.apps.dashboard.screens import DashboardScreen

if TYPE_CHECKING:
    from kube_helper.integrations.kubectl.client import KubectlClient


class KubeHelperApp(App[None]):
    """TUI application for browsing namespaces, pods, logs and services.

    Args:
        client: kubectl wrapper.
        config: Dashboard settings; defaults apply when omitted.
        search: Case-insensitive namespace filter.
    """

    TITLE = "Kubernetes Helper"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        client: KubectlClient,
        config: DashboardConfig | None = None,
        search: str = "",
    ) -> None:
        """Initialize the dashboard app.

        Args:
            client: kubectl wrapper used for every cluster call.
            config: Dashboard settings.
            search: Namespace filter.
        """
        super().__init__()
        self._client = client
        self._config = config or DashboardConfig()
        self._search = search
        self._dashboard: DashboardScreen | None = None

    @property
    def dashboard(self) -> DashboardScreen | None:
        return self._dashboard

    def on_mount(self) -> None:
        """Push the dashboard screen on mount."""
        self._dashboard = DashboardScreen(
            client=self._client,
            config=self._config,
            search=self._search,
        )
        self.push_screen(self._dashboard)

    async def action_quit(self) -> None:
        """Release every panel, then quit the application."""
        if self._dashboard is not None:
            self._dashboard.session.shutdown()
        self.exit()
