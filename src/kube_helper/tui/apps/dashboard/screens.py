"""Screen definitions for the dashboard TUI.

``DashboardScreen`` is the only screen. It forwards key presses, refresh
ticks and kubectl results to the ``Session`` state machine, executes the
requests the session answers with, and redraws from the session state.
"""

from __future__ import annotations

import subprocess
from functools import partial
from typing import TYPE_CHECKING

import structlog
from rich.text import Text
from textual import events, on, work
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Static

from kube_helper.tui.apps.dashboard import render
from kube_helper.tui.apps.dashboard.layout import FOOTER_HEIGHT, panel_heights
from kube_helper.tui.apps.dashboard.messages import (
    Exit,
    KubectlRequest,
    LogLoadDue,
    NamespaceDeleted,
    PodDeleted,
    Request,
    Result,
    ScheduleLogLoad,
)
from kube_helper.tui.apps.dashboard.panels import SlotKind
from kube_helper.tui.apps.dashboard.runner import RequestRunner
from kube_helper.tui.apps.dashboard.state import Mode, Session
from kube_helper.tui.apps.dashboard.widgets import PanelBox
from kube_helper.tui.base import BaseScreen

if TYPE_CHECKING:
    from textual.timer import Timer

    from kube_helper.core.config import DashboardConfig
    from kube_helper.integrations.kubectl.client import KubectlClient

logger = structlog.get_logger()


class DashboardScreen(BaseScreen[None]):
    """Namespace list and per-namespace panel view.

    All keys are handled here rather than through bindings so that the
    session decides what each key means in the current mode.

    Args:
        client: kubectl wrapper used by the request workers.
        config: Dashboard settings.
        search: Namespace filter from the command line.
    """

    DEFAULT_CSS = f"""
    DashboardScreen {{
        layout: vertical;
    }}
    #namespace-view {{
        width: 100%;
        height: 100%;
        content-align: center middle;
    }}
    #panel-view {{
        width: 100%;
        height: 100%;
    }}
    #footer {{
        height: {FOOTER_HEIGHT};
        padding: 1 1 0 1;
    }}
    """

    class RequestCompleted(Message):
        """Posted by a worker when its kubectl request has finished."""

        def __init__(self, result: Result) -> None:
            """Initialize with the request outcome.

            Args:
                result: Result to reconcile into the session.
            """
            self.result = result
            super().__init__()

    class ProcessStarted(Message):
        """Posted by a worker as soon as its kubectl process is running."""

        def __init__(self, request: KubectlRequest, process: subprocess.Popen[str]) -> None:
            self.request = request
            self.process = process
            super().__init__()

    def __init__(
        self,
        client: KubectlClient,
        config: DashboardConfig,
        search: str = "",
    ) -> None:
        super().__init__()
        self._config = config
        self._runner = RequestRunner(client)
        self.session = Session(search=search, config=config)
        self._tick_timer: Timer | None = None

    # =========================================================================
    # Layout
    # =========================================================================

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Static("", id="namespace-view")
        yield Vertical(
            PanelBox(id="pods-panel"),
            PanelBox(id="detail-panel"),
            Static("", id="footer"),
            id="panel-view",
        )

    def on_mount(self) -> None:
        """Size the session, load namespaces and start the refresh timer."""
        self.session.resize(self.app.size.width, self.app.size.height)
        self._execute(self.session.start())
        self._tick_timer = self.set_interval(self._config.refresh_interval, self._on_tick)
        self.refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        """Recompute pagination and panel budgets for the new size."""
        self.session.resize(event.size.width, event.size.height)
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw every widget from the session state."""
        session = self.session
        view = session.view
        in_panels = session.mode is Mode.PANEL_VIEW and view is not None

        namespace_view = self.query_one("#namespace-view", Static)
        namespace_view.display = not in_panels
        self.query_one("#panel-view", Vertical).display = in_panels
        if not in_panels or view is None:
            namespace_view.update(Text.from_markup(render.namespace_view(session)))
            return

        heights = panel_heights(session.height)
        on_pods = view.cycle.current().kind is SlotKind.PODS
        self.query_one("#pods-panel", PanelBox).show(
            render.pods_markup(session), heights.pods, active=on_pods
        )

        detail = render.detail_panel(session)
        detail_box = self.query_one("#detail-panel", PanelBox)
        detail_box.display = detail is not None
        if detail is not None:
            detail_box.show(
                render.detail_markup(session, detail),
                heights.detail,
                active=not on_pods and detail is view.active_panel(),
            )
        footer = Text.from_markup(render.footer_markup(session))
        self.query_one("#footer", Static).update(footer)

    # =========================================================================
    # Request execution
    # =========================================================================

    def _execute(self, requests: list[Request]) -> None:
        for request in requests:
            if isinstance(request, Exit):
                self.app.exit()
                return
            if isinstance(request, ScheduleLogLoad):
                logger.debug("log_load_scheduled", pod=request.pod, delay=request.delay)
                self.set_timer(request.delay, partial(self._log_load_due, request.pod))
                continue
            self._run_request(request)

    @work(thread=True, group="kubectl")
    def _run_request(self, request: KubectlRequest) -> None:
        """Run one kubectl request in a background thread.

        The process handle and the result are both delivered as messages, so
        the session is only ever touched from the event loop.
        """
        result = self._runner.run(
            request,
            on_spawn=lambda process: self.post_message(self.ProcessStarted(request, process)),
        )
        self.post_message(self.RequestCompleted(result))

    def _on_tick(self) -> None:
        self._execute(self.session.tick())

    def _log_load_due(self, pod: str) -> None:
        self._execute(self.session.apply(LogLoadDue(pod)))
        self.refresh_view()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        """Route every key press through the session."""
        event.stop()
        event.prevent_default()
        self._execute(self.session.handle_key(event.key, event.character))
        self.refresh_view()

    @on(ProcessStarted)
    def handle_process_started(self, message: ProcessStarted) -> None:
        """Let the session track the process so it can be terminated."""
        self.session.track_process(message.request, message.process)

    @on(RequestCompleted)
    def handle_request_completed(self, message: RequestCompleted) -> None:
        """Reconcile a finished request and redraw."""
        result = message.result
        logger.debug(
            "request_completed",
            result=type(result).__name__,
            error=getattr(result, "error", None),
        )
        self._execute(self.session.apply(result))
        if isinstance(result, NamespaceDeleted) and not result.error:
            self.notify_user(f"Namespace '{result.namespace}' deleted")
        elif isinstance(result, PodDeleted) and not result.error:
            self.notify_user(f"Pod '{result.pod}' deleted")
        self.refresh_view()
