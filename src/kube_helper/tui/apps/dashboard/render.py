"""Rich-markup rendering of the dashboard state.

Every function here is pure: it reads a ``Session`` (or a ``Panel``) and
returns markup for the screen's widgets to display. Text coming from kubectl
or the user is escaped before styling.
"""

from __future__ import annotations

from dataclasses import replace

from rich.markup import escape

from kube_helper.tui.apps.dashboard.layout import (
    compose_block,
    layout_panel,
    panel_heights,
)
from kube_helper.tui.apps.dashboard.panels import LOGS_TITLE_PREFIX, Panel, SlotKind
from kube_helper.tui.apps.dashboard.state import Session
from kube_helper.tui.theme import Styles

NAMESPACE_TITLE = "Kubernetes Helper - Select Namespace"
DELETING_SUFFIX = " (deleting...)"
MAX_FOOTER_POD_NAME = 40


def confirm_text(kind: str, name: str) -> str:
    return f"⚠️  Delete {kind} '{name}'? Press 'd' again to confirm, any other key to cancel"


# ============================================================================
# Namespace select
# ============================================================================


def namespace_view(session: Session) -> str:
    """Markup for the namespace list, lookup box and help line."""
    namespaces = session.namespaces
    lines = [Styles.title(NAMESPACE_TITLE), ""]

    if session.last_error:
        lines += [Styles.error(f"Error: {escape(session.last_error)}"), ""]

    if not namespaces.names:
        if session.search:
            lines.append(f"No namespaces found matching '{escape(session.search)}'...")
            lines.append("Try running without search term to see all namespaces")
        else:
            lines.append("No namespaces found...")
            lines.append("Command: kubectl get namespaces")
    else:
        per_page = session.per_page
        start, entries = namespaces.page_entries(per_page)
        for offset, name in enumerate(entries):
            display = escape(name)
            if name == namespaces.deleting:
                display += DELETING_SUFFIX
            if start + offset == namespaces.cursor:
                lines.append(f"> {Styles.selected(display)}")
            else:
                lines.append(f"  {Styles.normal(display)}")
        if namespaces.total_pages > 1:
            lines.append(
                Styles.muted(
                    f"Page {namespaces.page + 1}/{namespaces.total_pages} "
                    f"({len(namespaces.names)} namespaces)"
                )
            )

    lines.append("")
    if namespaces.deleting:
        lines.append(Styles.info(f"Deleting namespace '{escape(namespaces.deleting)}'..."))
    if namespaces.confirm_delete:
        lines.append(Styles.error(confirm_text("namespace", escape(namespaces.confirm_delete))))

    lines.extend(lookup_lines(session))
    lines.append(help_text(session))
    return "\n".join(lines)


def lookup_lines(session: Session) -> list[str]:
    """Service lookup box; empty when the lookup is idle."""
    lookup = session.lookup
    lines: list[str] = []
    if lookup.input_active:
        lines.append(f"{Styles.title('Service IP:')} {escape(lookup.query)}█")
        lines.append(Styles.muted("Enter: Search, Esc: Cancel"))
    elif lookup.searching:
        lines.append(Styles.info(f"Looking up services for {escape(lookup.query)}..."))
    if lookup.error:
        lines.append(Styles.error(f"Error: {escape(lookup.error)}"))
    if lookup.result:
        lines.append(Styles.title(f"Services for {escape(lookup.query)}:"))
        lines.extend(f"  {escape(line)}" for line in lookup.result)
    if lines:
        lines.append("")
    return lines


def help_text(session: Session) -> str:
    watch = "on" if session.namespace_watch else "off"
    return (
        "↑↓: Select, ←→: Page, Enter: Confirm, r: Refresh, d: Delete, "
        f"f: Find service by IP, w: Watch ({watch}), q: Quit"
    )


# ============================================================================
# Panel view
# ============================================================================


def panel_lines(panel: Panel, max_height: int, highlight: str | None = None) -> list[str]:
    """Markup lines for a panel block of at most ``max_height`` rows."""
    layout = layout_panel(
        panel.title,
        panel.content,
        max_height,
        panel.scroll,
        panel.max_lines,
        highlight=highlight,
    )
    styled = []
    for i, line in enumerate(layout.lines):
        text = escape(line)
        styled.append(Styles.selected(text) if i == layout.highlight else text)

    title = Styles.title(escape(layout.title))
    if panel.title.startswith(LOGS_TITLE_PREFIX) and not panel.watch:
        title += " " + Styles.muted("(paused)")
    return compose_block(replace(layout, title=title, lines=styled), max_height)


def detail_panel(session: Session) -> Panel | None:
    """Panel shown below the pods panel.

    The active describe or log panel when one is active; otherwise the
    describe panel, then the first log panel.
    """
    view = session.view
    if view is None:
        return None
    slot = view.cycle.current()
    if slot.kind is not SlotKind.PODS:
        active = view.active_panel()
        if active is not None:
            return active
    if view.describe_panel is not None:
        return view.describe_panel
    return next(iter(view.log_panels.values()), None)


def pods_markup(session: Session) -> str:
    view = session.view
    if view is None:
        return ""
    height = panel_heights(session.height).pods
    return "\n".join(panel_lines(view.pods_panel, height, session.highlighted_pod()))


def detail_markup(session: Session, panel: Panel) -> str:
    height = panel_heights(session.height).detail
    return "\n".join(panel_lines(panel, height))


def footer_markup(session: Session) -> str:
    """Status line, key help, delete progress and errors."""
    view = session.view
    if view is None:
        return ""
    parts = [Styles.title(f"Namespace: {escape(view.namespace)}")]

    slot = view.cycle.current()
    if slot.pod is not None:
        name = slot.pod
        if len(name) > MAX_FOOTER_POD_NAME:
            name = name[: MAX_FOOTER_POD_NAME - 3] + "..."
        label = "Describe" if slot.kind is SlotKind.DESCRIBE else "Logs"
        parts.append(f"{label}: {escape(name)}")
    parts.append(f"Tab: Switch ({view.cycle.index + 1}/{len(view.cycle)})")
    parts.append("↑↓: Scroll | PgUp/PgDn: Page | Home/End: Jump")
    parts.append("i: Describe | w: Watch | d: Delete pod | b: Back | q: Quit")

    lines = [" | ".join(parts)]
    if view.deleting:
        lines.append(Styles.info(f"Deleting pod '{escape(view.deleting)}'..."))
    if view.confirm_delete:
        lines.append(Styles.error(confirm_text("pod", escape(view.confirm_delete))))
    if session.last_error:
        lines.append(Styles.error(f"Error: {escape(session.last_error)}"))
    return "\n".join(lines)
