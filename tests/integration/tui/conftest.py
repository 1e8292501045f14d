"""Shared fixtures for TUI integration tests.

Provides reusable fixtures for driving the dashboard app against a
kubectl double.
"""

from __future__ import annotations

from typing import Protocol
from unittest.mock import MagicMock

import pytest
from textual.pilot import Pilot

from kube_helper.core.config import DashboardConfig
from kube_helper.tui.apps.dashboard.app import KubeHelperApp

TERMINAL_SIZE = (120, 40)

# Periodic refresh out of the way, short first-log delay
FAST_SETTINGS = {"refresh_interval": 600, "log_load_delay": 0.05}


class AppFactory(Protocol):
    """Protocol for the app_factory fixture."""

    def __call__(self, search: str = "", **config: object) -> KubeHelperApp: ...


async def settle(pilot: Pilot[None], rounds: int = 3) -> None:
    """Let kubectl workers finish and their results be applied.

    Results can trigger follow-up requests (a delete triggers a refresh), so
    this waits a few rounds.
    """
    for _ in range(rounds):
        await pilot.app.workers.wait_for_complete()
        await pilot.pause()


# ============================================================================
# App Factory
# ============================================================================


@pytest.fixture
def app_factory(mock_kubectl: MagicMock) -> AppFactory:
    """Factory fixture for creating KubeHelperApp instances.

    Every app shares the ``mock_kubectl`` double so tests can assert calls.
    """

    def _create_app(search: str = "", **config: object) -> KubeHelperApp:
        settings = DashboardConfig.model_validate({**FAST_SETTINGS, **config})
        return KubeHelperApp(client=mock_kubectl, config=settings, search=search)

    return _create_app
