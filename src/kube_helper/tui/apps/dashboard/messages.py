"""Requests issued by the dashboard state machine and their results.

Requests describe work for the screen to perform (run kubectl, arm a timer,
exit). Each kubectl request produces exactly one result, which is fed back
into ``Session.apply``. Results carry entity names so that stale ones can be
recognised and dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ============================================================================
# Requests
# ============================================================================


@dataclass(frozen=True)
class FetchNamespaces:
    """List namespaces matching ``search``."""

    search: str = ""


@dataclass(frozen=True)
class DeleteNamespace:
    """Delete a namespace."""

    namespace: str


@dataclass(frozen=True)
class FetchPods:
    """List pods of a namespace."""

    namespace: str


@dataclass(frozen=True)
class DeletePod:
    """Delete a pod."""

    namespace: str
    pod: str


@dataclass(frozen=True)
class DescribePod:
    """Describe a pod."""

    namespace: str
    pod: str


@dataclass(frozen=True)
class FetchLogs:
    """Tail the logs of a pod."""

    namespace: str
    pod: str
    tail_lines: int = 50


@dataclass(frozen=True)
class LookupService:
    """Resolve the services answering on an IP."""

    ip: str


@dataclass(frozen=True)
class ScheduleLogLoad:
    """Arm a one-shot timer that delivers ``LogLoadDue`` after ``delay``."""

    pod: str
    delay: float


@dataclass(frozen=True)
class Exit:
    """Leave the application."""


KubectlRequest = (
    FetchNamespaces
    | DeleteNamespace
    | FetchPods
    | DeletePod
    | DescribePod
    | FetchLogs
    | LookupService
)
Request = KubectlRequest | ScheduleLogLoad | Exit


# ============================================================================
# Results
# ============================================================================


@dataclass(frozen=True)
class NamespacesLoaded:
    namespaces: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class NamespaceDeleted:
    namespace: str
    error: str | None = None


@dataclass(frozen=True)
class PodsLoaded:
    namespace: str
    lines: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class PodDeleted:
    namespace: str
    pod: str
    error: str | None = None


@dataclass(frozen=True)
class PodDescribed:
    namespace: str
    pod: str
    lines: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class LogsLoaded:
    namespace: str
    pod: str
    lines: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class ServiceLookedUp:
    ip: str
    lines: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class LogLoadDue:
    """The delay for a pod's first log fetch has elapsed."""

    pod: str


Result = (
    NamespacesLoaded
    | NamespaceDeleted
    | PodsLoaded
    | PodDeleted
    | PodDescribed
    | LogsLoaded
    | ServiceLookedUp
    | LogLoadDue
)
