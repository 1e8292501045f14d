"""Navigation state machine for the dashboard.

A ``Session`` holds everything the dashboard shows. It reacts to key
presses, refresh ticks and kubectl results, one at a time, and answers each
with a list of requests (see ``messages``) for the screen to carry out. It
performs no I/O itself apart from terminating tracked processes when their
panels are discarded.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

import structlog

from kube_helper.core.config import DashboardConfig
from kube_helper.tui.apps.dashboard.layout import (
    PODS_PANEL_MAX_LINES,
    available_rows,
    detail_max_lines,
    panel_heights,
)
from kube_helper.tui.apps.dashboard.messages import (
    DeleteNamespace,
    DeletePod,
    DescribePod,
    Exit,
    FetchLogs,
    FetchNamespaces,
    FetchPods,
    LogLoadDue,
    LogsLoaded,
    LookupService,
    NamespaceDeleted,
    NamespacesLoaded,
    PodDeleted,
    PodDescribed,
    PodsLoaded,
    Request,
    Result,
    ScheduleLogLoad,
    ServiceLookedUp,
)
from kube_helper.tui.apps.dashboard.panels import (
    LOADING_LOGS,
    LOADING_PODS,
    Panel,
    PanelCycle,
    Slot,
    SlotKind,
    describe_panel,
    log_panel,
    terminate,
)

logger = structlog.get_logger()

NAMESPACE_LIST_CHROME = 8
MIN_NAMESPACES_PER_PAGE = 3
MAX_NAMESPACES_PER_PAGE = 10

# Keys that leave a pending delete confirmation in place
NAMESPACE_CONFIRM_KEYS = frozenset({"d", "enter", "q"})
POD_CONFIRM_KEYS = frozenset({"d", "tab", "shift+tab", "q"})

EMPTY_IP_ERROR = "please enter an IP address"


class Mode(Enum):
    """Top-level dashboard views."""

    NAMESPACE_SELECT = "namespace_select"
    PANEL_VIEW = "panel_view"


def parse_pod_names(lines: Sequence[str]) -> list[str]:
    """Extract pod names from ``kubectl get pods`` output.

    Blank lines and the header are skipped; the name is the first
    whitespace-delimited field.
    """
    names = []
    for line in lines:
        if not line.strip() or line.startswith("NAME"):
            continue
        names.append(line.split()[0])
    return names


def namespaces_per_page(height: int) -> int:
    """Namespaces shown per page for a terminal of ``height`` rows."""
    return min(max(height - NAMESPACE_LIST_CHROME, MIN_NAMESPACES_PER_PAGE), MAX_NAMESPACES_PER_PAGE)


# ============================================================================
# Sub-states
# ============================================================================


@dataclass
class NamespaceList:
    """Filtered namespace names with cursor, pagination and delete state."""

    names: list[str] = field(default_factory=list)
    cursor: int = 0
    confirm_delete: str | None = None
    deleting: str | None = None
    page: int = 0
    total_pages: int = 1

    @property
    def selected(self) -> str | None:
        if not self.names:
            return None
        return self.names[self.cursor]

    def paginate(self, per_page: int) -> None:
        """Recompute the derived page fields from the cursor."""
        per_page = max(1, per_page)
        total = len(self.names)
        if total == 0:
            self.cursor = 0
            self.page = 0
            self.total_pages = 1
            return
        self.total_pages = max(1, -(-total // per_page))
        self.cursor = min(max(0, self.cursor), total - 1)
        self.page = self.cursor // per_page

    def replace(self, names: Sequence[str], per_page: int) -> None:
        self.names = list(names)
        self.paginate(per_page)

    def move(self, delta: int, per_page: int) -> None:
        self.cursor += delta
        self.paginate(per_page)

    def jump(self, index: int, per_page: int) -> None:
        if not self.names:
            return
        self.cursor = index if index >= 0 else len(self.names) + index
        self.paginate(per_page)

    def change_page(self, delta: int, per_page: int) -> None:
        """Move a whole page; the cursor lands on the page's first entry."""
        total = len(self.names)
        if total == 0:
            return
        page = min(max(0, self.page + delta), self.total_pages - 1)
        self.cursor = min(page * per_page, total - 1)
        self.confirm_delete = None
        self.paginate(per_page)

    def page_entries(self, per_page: int) -> tuple[int, list[str]]:
        """Return the index of the first entry on the current page and its names."""
        start = self.page * max(1, per_page)
        return start, self.names[start : start + per_page]


@dataclass
class ServiceLookup:
    """State of the service-by-IP lookup box."""

    query: str = ""
    searching: bool = False
    result: list[str] = field(default_factory=list)
    error: str | None = None
    input_active: bool = False

    def activate(self) -> None:
        self.input_active = True
        self.searching = False
        self.error = None

    def reset(self) -> None:
        self.query = ""
        self.searching = False
        self.result = []
        self.error = None
        self.input_active = False

    def type(self, text: str) -> None:
        self.query += text

    def backspace(self) -> None:
        self.query = self.query[:-1]

    def submit(self) -> str | None:
        """Validate the query. Returns the IP to look up, or None if empty."""
        ip = self.query.strip()
        self.result = []
        if not ip:
            self.error = EMPTY_IP_ERROR
            self.searching = False
            return None
        self.query = ip
        self.searching = True
        self.error = None
        self.input_active = False
        return ip

    def complete(self, result: ServiceLookedUp) -> None:
        self.searching = False
        if result.error:
            self.error = result.error
            self.result = []
            return
        self.error = None
        self.result = list(result.lines) or [f"No service found for IP {result.ip}"]


@dataclass
class PanelViewState:
    """State of the multi-panel view for one namespace.

    ``pod_names`` is the latest parsed pod listing. It indexes the pod cursor
    and sizes the panel cycle even for pods whose log panel does not exist yet.
    """

    namespace: str
    pods_panel: Panel
    pod_cursor: int = 0
    pod_names: list[str] = field(default_factory=list)
    log_panels: dict[str, Panel] = field(default_factory=dict)
    describe_panel: Panel | None = None
    cycle: PanelCycle = field(default_factory=PanelCycle)
    confirm_delete: str | None = None
    deleting: str | None = None
    pending_log_load: str | None = None

    @property
    def known_pods(self) -> list[str]:
        return self.pod_names

    @property
    def describe_target(self) -> str | None:
        return self.describe_panel.pod if self.describe_panel else None

    def panels(self) -> list[Panel]:
        """Every panel currently materialized."""
        panels = [self.pods_panel]
        if self.describe_panel:
            panels.append(self.describe_panel)
        panels.extend(self.log_panels.values())
        return panels

    def active_panel(self) -> Panel | None:
        """Panel behind the active slot (None for an unmaterialized log slot)."""
        slot = self.cycle.current()
        if slot.kind is SlotKind.PODS:
            return self.pods_panel
        if slot.kind is SlotKind.DESCRIBE:
            return self.describe_panel
        return self.log_panels.get(slot.pod or "")

    def rebuild_cycle(self) -> None:
        self.cycle.rebuild(self.describe_target, self.pod_names)

    def clamp_pod_cursor(self) -> None:
        if not self.pod_names:
            self.pod_cursor = 0
            return
        self.pod_cursor = min(max(0, self.pod_cursor), len(self.pod_names) - 1)

    def close_describe(self) -> None:
        if self.describe_panel is None:
            return
        self.describe_panel.release()
        self.describe_panel = None
        self.rebuild_cycle()

    def release_all(self) -> None:
        for panel in self.panels():
            panel.release()


# ============================================================================
# Session
# ============================================================================

KeyHandler = Callable[["Session"], list[Request]]


class Session:
    """Dashboard state for one run.

    Args:
        search: Case-insensitive namespace filter from the command line.
        config: Dashboard settings.
    """

    def __init__(self, search: str = "", config: DashboardConfig | None = None) -> None:
        self._config = config or DashboardConfig()
        self.mode = Mode.NAMESPACE_SELECT
        self.search = search
        self.selected_namespace: str | None = None
        self.namespace_watch = True
        self.last_error: str | None = None
        self.width = 0
        self.height = 0
        self.namespaces = NamespaceList()
        self.lookup = ServiceLookup()
        self.view: PanelViewState | None = None
        self._log = logger.bind(search=search)

    @property
    def per_page(self) -> int:
        return namespaces_per_page(self.height)

    @property
    def config(self) -> DashboardConfig:
        return self._config

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> list[Request]:
        """Initial requests: the namespace listing, with watch on."""
        self.namespace_watch = True
        return [FetchNamespaces(self.search)]

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.namespaces.paginate(self.per_page)
        if self.view is None:
            return
        self.view.pods_panel.max_lines = PODS_PANEL_MAX_LINES
        budget = detail_max_lines(height)
        for panel in self.view.panels()[1:]:
            panel.max_lines = budget

    def shutdown(self) -> None:
        """Release every panel, terminating in-flight processes."""
        if self.view is not None:
            self.view.release_all()

    def track_process(self, request: Request, process: subprocess.Popen[str]) -> None:
        """Attach a freshly spawned kubectl process to the panel it refreshes.

        Processes whose panel has already gone away are terminated.
        """
        if not isinstance(request, FetchPods | FetchLogs | DescribePod):
            return
        panel = self._panel_for(request)
        if panel is None:
            terminate(process, owner=type(request).__name__)
            return
        panel.process = process

    def _panel_for(self, request: FetchPods | FetchLogs | DescribePod) -> Panel | None:
        view = self._view_for(request.namespace)
        if view is None:
            return None
        if isinstance(request, FetchPods):
            return view.pods_panel
        if isinstance(request, FetchLogs):
            return view.log_panels.get(request.pod)
        if view.describe_target == request.pod:
            return view.describe_panel
        return None

    def _view_for(self, namespace: str) -> PanelViewState | None:
        """The panel view, if it is showing ``namespace``."""
        if self.mode is not Mode.PANEL_VIEW or self.view is None:
            return None
        if self.view.namespace != namespace:
            return None
        return self.view

    @property
    def _detail_max_lines(self) -> int:
        return detail_max_lines(self.height)

    def _detail_page_size(self, panel: Panel) -> int:
        rows = available_rows(panel_heights(self.height).detail)
        return max(1, min(panel.max_lines, rows))

    # =========================================================================
    # Keyboard
    # =========================================================================

    def handle_key(self, key: str, character: str | None = None) -> list[Request]:
        """Apply one key press.

        Args:
            key: Textual key name (``"up"``, ``"enter"``, ``"d"``...).
            character: The printable character for the key, if any.

        Returns:
            Requests to execute.
        """
        if self.mode is Mode.NAMESPACE_SELECT and self.lookup.input_active:
            handled, requests = self._handle_lookup_key(key, character)
            if handled:
                return requests

        self._expire_confirmation(key)
        keymap = NAMESPACE_KEYS if self.mode is Mode.NAMESPACE_SELECT else PANEL_KEYS
        handler = keymap.get(key)
        if handler is None:
            return []
        return handler(self)

    def _handle_lookup_key(self, key: str, character: str | None) -> tuple[bool, list[Request]]:
        if key == "enter":
            ip = self.lookup.submit()
            return True, [LookupService(ip)] if ip else []
        if key == "escape":
            self.lookup.reset()
            return True, []
        if key in ("backspace", "delete"):
            self.lookup.backspace()
            return True, []
        if character and len(character) == 1 and character.isprintable():
            self.lookup.type(character)
            return True, []
        return False, []

    def _expire_confirmation(self, key: str) -> None:
        if self.mode is Mode.NAMESPACE_SELECT:
            if self.namespaces.confirm_delete and key not in NAMESPACE_CONFIRM_KEYS:
                self.namespaces.confirm_delete = None
        elif self.view is not None and self.view.confirm_delete:
            if key not in POD_CONFIRM_KEYS:
                self.view.confirm_delete = None

    def _quit(self) -> list[Request]:
        self.shutdown()
        return [Exit()]

    # -- namespace select -----------------------------------------------------

    def _namespace_up(self) -> list[Request]:
        self.namespaces.confirm_delete = None
        self.namespaces.move(-1, self.per_page)
        return []

    def _namespace_down(self) -> list[Request]:
        self.namespaces.confirm_delete = None
        self.namespaces.move(1, self.per_page)
        return []

    def _namespace_prev(self) -> list[Request]:
        self.namespaces.move(-1, self.per_page)
        return []

    def _namespace_next(self) -> list[Request]:
        self.namespaces.move(1, self.per_page)
        return []

    def _namespace_prev_page(self) -> list[Request]:
        self.namespaces.change_page(-1, self.per_page)
        return []

    def _namespace_next_page(self) -> list[Request]:
        self.namespaces.change_page(1, self.per_page)
        return []

    def _namespace_first(self) -> list[Request]:
        self.namespaces.jump(0, self.per_page)
        return []

    def _namespace_last(self) -> list[Request]:
        self.namespaces.jump(-1, self.per_page)
        return []

    def _refresh_namespaces(self) -> list[Request]:
        self.namespaces.confirm_delete = None
        self.last_error = None
        return [FetchNamespaces(self.search)]

    def _toggle_namespace_watch(self) -> list[Request]:
        self.namespace_watch = not self.namespace_watch
        return []

    def _open_lookup(self) -> list[Request]:
        self.lookup.activate()
        return []

    def _reset_lookup(self) -> list[Request]:
        self.lookup.reset()
        return []

    def _delete_namespace(self) -> list[Request]:
        namespaces = self.namespaces
        target = namespaces.selected
        if target is None or namespaces.deleting:
            return []
        if namespaces.confirm_delete == target:
            namespaces.deleting = target
            namespaces.confirm_delete = None
            self._log.info("namespace_delete_confirmed", namespace=target)
            return [DeleteNamespace(target)]
        namespaces.confirm_delete = target
        return []

    def _enter_namespace(self) -> list[Request]:
        name = self.namespaces.selected
        if name is None:
            return []
        self.namespaces.confirm_delete = None
        self.lookup.input_active = False
        self.last_error = None
        self.selected_namespace = name
        self.mode = Mode.PANEL_VIEW
        self.view = PanelViewState(
            namespace=name,
            pods_panel=Panel(
                title=f"Pods in {name}",
                content=[LOADING_PODS],
                max_lines=PODS_PANEL_MAX_LINES,
                watch=True,
            ),
        )
        self._log.info("panel_view_entered", namespace=name)
        return [FetchPods(name)]

    # -- panel view -----------------------------------------------------------

    def _back(self) -> list[Request]:
        self.shutdown()
        self.view = None
        self.mode = Mode.NAMESPACE_SELECT
        self.last_error = None
        self._log.info("panel_view_left", namespace=self.selected_namespace)
        return [FetchNamespaces(self.search)]

    def selected_pod(self) -> str | None:
        """Pod that describe/delete act on; the pod cursor follows it."""
        view = self.view
        if view is None or not view.pod_names:
            if view is not None:
                view.pod_cursor = 0
            return None
        slot = view.cycle.current()
        if slot.kind is not SlotKind.PODS and slot.pod in view.pod_names:
            view.pod_cursor = view.pod_names.index(slot.pod)
            return slot.pod
        view.clamp_pod_cursor()
        return view.pod_names[view.pod_cursor]

    def highlighted_pod(self) -> str | None:
        """Pod to mark in the pods panel."""
        view = self.view
        if view is None:
            return None
        slot = view.cycle.current()
        if slot.kind is SlotKind.PODS:
            if not view.pod_names:
                return None
            return view.pod_names[min(view.pod_cursor, len(view.pod_names) - 1)]
        return slot.pod

    def _move_pod_cursor(self, delta: int) -> None:
        assert self.view is not None
        self.view.pod_cursor += delta
        self.view.clamp_pod_cursor()
        self.view.confirm_delete = None

    def _scroll_active(self, lines: int | None, *, pages: int = 0) -> None:
        assert self.view is not None
        panel = self.view.active_panel()
        if panel is None:
            return
        delta = lines if lines is not None else pages * self._detail_page_size(panel)
        panel.scroll_by(delta)

    def _panel_up(self) -> list[Request]:
        if self._on_pods_slot():
            self._move_pod_cursor(-1)
        else:
            self._scroll_active(-1)
        return []

    def _panel_down(self) -> list[Request]:
        if self._on_pods_slot():
            self._move_pod_cursor(1)
        else:
            self._scroll_active(1)
        return []

    def _panel_page_up(self) -> list[Request]:
        if self._on_pods_slot():
            self._move_pod_cursor(-PODS_PANEL_MAX_LINES)
        else:
            self._scroll_active(None, pages=-1)
        return []

    def _panel_page_down(self) -> list[Request]:
        if self._on_pods_slot():
            self._move_pod_cursor(PODS_PANEL_MAX_LINES)
        else:
            self._scroll_active(None, pages=1)
        return []

    def _panel_home(self) -> list[Request]:
        assert self.view is not None
        if self._on_pods_slot():
            self._move_pod_cursor(-len(self.view.pod_names))
        elif panel := self.view.active_panel():
            panel.scroll_to_top()
        return []

    def _panel_end(self) -> list[Request]:
        assert self.view is not None
        if self._on_pods_slot():
            self._move_pod_cursor(len(self.view.pod_names))
        elif panel := self.view.active_panel():
            panel.scroll_to_bottom()
        return []

    def _on_pods_slot(self) -> bool:
        assert self.view is not None
        return self.view.cycle.current().kind is SlotKind.PODS

    def _next_panel(self) -> list[Request]:
        assert self.view is not None
        return self._materialize(self.view.cycle.next())

    def _previous_panel(self) -> list[Request]:
        assert self.view is not None
        return self._materialize(self.view.cycle.previous())

    def _materialize(self, slot: Slot) -> list[Request]:
        """Create the log panel behind ``slot`` and schedule its first fetch."""
        view = self.view
        assert view is not None
        if slot.kind is not SlotKind.LOGS or slot.pod is None or slot.pod in view.log_panels:
            return []
        view.log_panels[slot.pod] = log_panel(slot.pod, self._detail_max_lines)
        view.pending_log_load = slot.pod
        self._log.debug("log_panel_created", pod=slot.pod)
        return [ScheduleLogLoad(slot.pod, self._config.log_load_delay)]

    def _toggle_describe(self) -> list[Request]:
        view = self.view
        assert view is not None
        target = self.selected_pod()
        if target is None:
            return []
        if view.describe_target == target:
            view.close_describe()
            return []
        if view.describe_panel is not None:
            view.describe_panel.release()
        view.describe_panel = describe_panel(target, self._detail_max_lines)
        view.rebuild_cycle()
        view.cycle.focus(Slot(SlotKind.DESCRIBE, target))
        return [DescribePod(view.namespace, target)]

    def _delete_pod(self) -> list[Request]:
        view = self.view
        assert view is not None
        if view.deleting:
            return []
        target = self.selected_pod()
        if target is None:
            return []
        if view.confirm_delete == target:
            view.deleting = target
            view.confirm_delete = None
            self._log.info("pod_delete_confirmed", namespace=view.namespace, pod=target)
            return [DeletePod(view.namespace, target)]
        view.confirm_delete = target
        return []

    def _refresh_pods(self) -> list[Request]:
        assert self.view is not None
        self.last_error = None
        return [FetchPods(self.view.namespace)]

    def _toggle_watch(self) -> list[Request]:
        assert self.view is not None
        slot = self.view.cycle.current()
        panel = self.view.active_panel()
        if panel is not None and slot.kind is not SlotKind.DESCRIBE:
            panel.watch = not panel.watch
        return []

    # =========================================================================
    # Timer
    # =========================================================================

    def tick(self) -> list[Request]:
        """Periodic refresh of whatever the current view watches."""
        if self.mode is Mode.NAMESPACE_SELECT:
            return [FetchNamespaces(self.search)] if self.namespace_watch else []

        view = self.view
        if view is None or not view.pods_panel.watch:
            return []
        requests: list[Request] = [FetchPods(view.namespace)]
        for pod, panel in view.log_panels.items():
            if panel.watch and pod != view.pending_log_load:
                requests.append(FetchLogs(view.namespace, pod, self._config.log_tail_lines))
        return requests

    # =========================================================================
    # Results
    # =========================================================================

    def apply(self, result: Result) -> list[Request]:
        """Merge a completed request (or elapsed timer) into the state."""
        if isinstance(result, NamespacesLoaded):
            return self._on_namespaces_loaded(result)
        if isinstance(result, NamespaceDeleted):
            return self._on_namespace_deleted(result)
        if isinstance(result, PodsLoaded):
            return self._on_pods_loaded(result)
        if isinstance(result, PodDeleted):
            return self._on_pod_deleted(result)
        if isinstance(result, PodDescribed):
            return self._on_pod_described(result)
        if isinstance(result, LogsLoaded):
            return self._on_logs_loaded(result)
        if isinstance(result, LogLoadDue):
            return self._on_log_load_due(result)
        if isinstance(result, ServiceLookedUp):
            self.lookup.complete(result)
            return []
        raise TypeError(f"unknown result: {result!r}")

    def _on_namespaces_loaded(self, result: NamespacesLoaded) -> list[Request]:
        if result.error:
            self.last_error = result.error
            return []
        self.namespaces.replace(result.namespaces, self.per_page)
        return []

    def _on_namespace_deleted(self, result: NamespaceDeleted) -> list[Request]:
        self.namespaces.confirm_delete = None
        if self.namespaces.deleting == result.namespace:
            self.namespaces.deleting = None
        if result.error:
            self.last_error = result.error
            return []
        self._log.info("namespace_deleted", namespace=result.namespace)
        return [FetchNamespaces(self.search)]

    def _on_pods_loaded(self, result: PodsLoaded) -> list[Request]:
        view = self._view_for(result.namespace)
        if view is None:
            self._log.debug("stale_result_dropped", result="pods", namespace=result.namespace)
            return []
        self.last_error = result.error
        if result.error:
            return []

        panel = view.pods_panel
        lines = list(result.lines[: self._config.max_pod_lines])
        previous = len(panel.content)
        panel.content = lines
        if previous == 0 or abs(previous - len(lines)) > 5:
            panel.scroll = 0
        panel.clamp_scroll()

        names = parse_pod_names(result.lines)
        view.pod_names = names
        view.clamp_pod_cursor()
        if view.confirm_delete not in names:
            view.confirm_delete = None
        if view.describe_target is not None and view.describe_target not in names:
            view.close_describe()
        for pod in [p for p in view.log_panels if p not in names]:
            view.log_panels.pop(pod).release()
        if view.pending_log_load not in names:
            view.pending_log_load = None
        view.rebuild_cycle()
        return []

    def _on_pod_deleted(self, result: PodDeleted) -> list[Request]:
        view = self._view_for(result.namespace)
        if view is None:
            return []
        view.confirm_delete = None
        if view.deleting == result.pod:
            view.deleting = None
        if result.error:
            self.last_error = result.error
            return []
        self._log.info("pod_deleted", namespace=result.namespace, pod=result.pod)
        return [FetchPods(view.namespace)]

    def _on_pod_described(self, result: PodDescribed) -> list[Request]:
        view = self._view_for(result.namespace)
        if view is None or view.describe_panel is None or view.describe_target != result.pod:
            self._log.debug("stale_result_dropped", result="describe", pod=result.pod)
            return []
        panel = view.describe_panel
        if result.error:
            self.last_error = result.error
            panel.content = [f"Describe error: {result.error}"]
        else:
            panel.content = list(result.lines)
        panel.scroll_to_top()
        return []

    def _on_logs_loaded(self, result: LogsLoaded) -> list[Request]:
        view = self._view_for(result.namespace)
        panel = view.log_panels.get(result.pod) if view else None
        if panel is None:
            self._log.debug("stale_result_dropped", result="logs", pod=result.pod)
            return []
        if result.error:
            if panel.content == [LOADING_LOGS]:
                panel.content = [f"Log error: {result.error}"]
            else:
                self.last_error = result.error
            return []
        panel.content = list(result.lines)
        panel.follow_tail()
        return []

    def _on_log_load_due(self, result: LogLoadDue) -> list[Request]:
        view = self.view
        if self.mode is not Mode.PANEL_VIEW or view is None:
            return []
        if view.pending_log_load != result.pod:
            return []
        view.pending_log_load = None
        if result.pod not in view.log_panels:
            return []
        return [FetchLogs(view.namespace, result.pod, self._config.log_tail_lines)]


NAMESPACE_KEYS: dict[str, KeyHandler] = {
    "q": Session._quit,
    "up": Session._namespace_up,
    "k": Session._namespace_up,
    "down": Session._namespace_down,
    "j": Session._namespace_down,
    "shift+tab": Session._namespace_prev,
    "tab": Session._namespace_next,
    "left": Session._namespace_prev_page,
    "h": Session._namespace_prev_page,
    "right": Session._namespace_next_page,
    "l": Session._namespace_next_page,
    "home": Session._namespace_first,
    "g": Session._namespace_first,
    "end": Session._namespace_last,
    "G": Session._namespace_last,
    "enter": Session._enter_namespace,
    "r": Session._refresh_namespaces,
    "d": Session._delete_namespace,
    "f": Session._open_lookup,
    "escape": Session._reset_lookup,
    "w": Session._toggle_namespace_watch,
}

PANEL_KEYS: dict[str, KeyHandler] = {
    "q": Session._quit,
    "up": Session._panel_up,
    "k": Session._panel_up,
    "down": Session._panel_down,
    "j": Session._panel_down,
    "pageup": Session._panel_page_up,
    "pagedown": Session._panel_page_down,
    "home": Session._panel_home,
    "g": Session._panel_home,
    "end": Session._panel_end,
    "G": Session._panel_end,
    "tab": Session._next_panel,
    "shift+tab": Session._previous_panel,
    "i": Session._toggle_describe,
    "d": Session._delete_pod,
    "r": Session._refresh_pods,
    "w": Session._toggle_watch,
    "b": Session._back,
    "escape": Session._back,
}
