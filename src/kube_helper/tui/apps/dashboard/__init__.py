"""Kubernetes namespace dashboard TUI application.

Usage:
    from kube_helper.tui.apps.dashboard import KubeHelperApp

    app = KubeHelperApp(client=client, config=config, search="team-a")
    app.run()
"""

from kube_helper.tui.apps.dashboard.app import KubeHelperApp

__all__ = ["KubeHelperApp"]
