"""Scrollable text panels and the active-panel cycle."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import structlog

logger = structlog.get_logger()

LOADING_PODS = "Loading pods..."
LOADING_LOGS = "Loading logs..."
FETCHING_DESCRIBE = "Fetching describe..."
LOGS_TITLE_PREFIX = "Logs: "
DESCRIBE_TITLE_PREFIX = "Describe: "


@dataclass
class Panel:
    """A titled, scrollable region of text lines.

    ``process`` is the kubectl process currently refreshing this panel, kept
    only so it can be terminated when the panel goes away. Content always
    arrives through result messages.
    """

    title: str
    content: list[str] = field(default_factory=list)
    max_lines: int = 20
    scroll: int = 0
    watch: bool = False
    pod: str | None = None
    process: subprocess.Popen[str] | None = field(default=None, repr=False)

    @property
    def max_scroll(self) -> int:
        return max(0, len(self.content) - self.max_lines)

    def clamp_scroll(self) -> None:
        self.scroll = min(max(0, self.scroll), self.max_scroll)

    def scroll_by(self, delta: int) -> None:
        self.scroll += delta
        self.clamp_scroll()

    def scroll_to_top(self) -> None:
        self.scroll = 0

    def scroll_to_bottom(self) -> None:
        self.scroll = self.max_scroll

    def follow_tail(self) -> None:
        """Show the newest lines."""
        self.scroll_to_bottom()

    def release(self) -> None:
        """Terminate the tracked process if it is still running."""
        process, self.process = self.process, None
        if process is not None:
            terminate(process, owner=self.title)


def terminate(process: subprocess.Popen[str], owner: str = "") -> None:
    """Kill ``process`` unless it has already exited."""
    if process.poll() is not None:
        return
    try:
        process.kill()
    except OSError as e:
        logger.debug("process_kill_failed", owner=owner, error=str(e))
    else:
        logger.debug("process_killed", owner=owner, pid=process.pid)


def log_panel(pod: str, max_lines: int) -> Panel:
    """Create a placeholder log panel for ``pod``."""
    return Panel(
        title=f"{LOGS_TITLE_PREFIX}{pod}",
        content=[LOADING_LOGS],
        max_lines=max_lines,
        watch=True,
        pod=pod,
    )


def describe_panel(pod: str, max_lines: int) -> Panel:
    """Create a placeholder describe panel for ``pod``."""
    return Panel(
        title=f"{DESCRIBE_TITLE_PREFIX}{pod}",
        content=[FETCHING_DESCRIBE],
        max_lines=max_lines,
        pod=pod,
    )


class SlotKind(Enum):
    """Kinds of entries in the panel cycle."""

    PODS = "pods"
    DESCRIBE = "describe"
    LOGS = "logs"


@dataclass(frozen=True)
class Slot:
    """One position in the panel cycle."""

    kind: SlotKind
    pod: str | None = None


PODS_SLOT = Slot(SlotKind.PODS)


class PanelCycle:
    """Ordered ring of panel slots: pods, optional describe, one log slot per pod.

    The active position survives rebuilds while its slot still exists;
    otherwise it falls back to the pods slot.
    """

    def __init__(self) -> None:
        self._slots: list[Slot] = [PODS_SLOT]
        self._index = 0

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def index(self) -> int:
        return self._index

    @property
    def slots(self) -> list[Slot]:
        return list(self._slots)

    def current(self) -> Slot:
        return self._slots[self._index]

    def next(self) -> Slot:
        self._index = (self._index + 1) % len(self._slots)
        return self.current()

    def previous(self) -> Slot:
        self._index = (self._index - 1) % len(self._slots)
        return self.current()

    def focus(self, slot: Slot) -> bool:
        """Make ``slot`` active. Returns False if it is not in the cycle."""
        if slot not in self._slots:
            return False
        self._index = self._slots.index(slot)
        return True

    def reset(self) -> None:
        self._index = 0

    def rebuild(self, describe_target: str | None, pods: Sequence[str]) -> None:
        """Recompute slots for the current describe target and pod list."""
        active = self.current()
        slots = [PODS_SLOT]
        if describe_target is not None:
            slots.append(Slot(SlotKind.DESCRIBE, describe_target))
        slots.extend(Slot(SlotKind.LOGS, pod) for pod in pods)
        self._slots = slots
        if not self.focus(active):
            self._index = 0
