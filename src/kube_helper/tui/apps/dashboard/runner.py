"""Execute dashboard requests against kubectl.

``RequestRunner.run`` is called from worker threads. It maps one kubectl
request onto one ``KubectlClient`` call and always returns a result; kubectl
failures are carried in the result's ``error`` field instead of raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from kube_helper.integrations.kubectl.exceptions import KubectlError
from kube_helper.tui.apps.dashboard.messages import (
    DeleteNamespace,
    DeletePod,
    DescribePod,
    FetchLogs,
    FetchNamespaces,
    FetchPods,
    KubectlRequest,
    LogsLoaded,
    LookupService,
    NamespaceDeleted,
    NamespacesLoaded,
    PodDeleted,
    PodDescribed,
    PodsLoaded,
    Result,
    ServiceLookedUp,
)

if TYPE_CHECKING:
    from kube_helper.integrations.kubectl.client import KubectlClient, SpawnCallback

logger = structlog.get_logger()


class RequestRunner:
    """Runs kubectl requests and packages their outcome as results.

    Args:
        client: kubectl wrapper to call.
    """

    def __init__(self, client: KubectlClient) -> None:
        self._client = client

    def run(self, request: KubectlRequest, on_spawn: SpawnCallback | None = None) -> Result:
        """Run ``request`` and return its result. Never raises ``KubectlError``."""
        try:
            return self._dispatch(request, on_spawn)
        except KubectlError as e:
            logger.warning(
                "kubectl_request_failed",
                request=type(request).__name__,
                error=str(e),
            )
            return self._failure(request, str(e))

    def _dispatch(self, request: KubectlRequest, on_spawn: SpawnCallback | None) -> Result:
        client = self._client
        if isinstance(request, FetchNamespaces):
            return NamespacesLoaded(
                namespaces=client.list_namespaces(request.search, on_spawn=on_spawn)
            )
        if isinstance(request, DeleteNamespace):
            client.delete_namespace(request.namespace, on_spawn=on_spawn)
            return NamespaceDeleted(namespace=request.namespace)
        if isinstance(request, FetchPods):
            return PodsLoaded(
                namespace=request.namespace,
                lines=client.list_pods(request.namespace, on_spawn=on_spawn),
            )
        if isinstance(request, DeletePod):
            client.delete_pod(request.namespace, request.pod, on_spawn=on_spawn)
            return PodDeleted(namespace=request.namespace, pod=request.pod)
        if isinstance(request, DescribePod):
            return PodDescribed(
                namespace=request.namespace,
                pod=request.pod,
                lines=client.describe_pod(request.namespace, request.pod, on_spawn=on_spawn),
            )
        if isinstance(request, FetchLogs):
            return LogsLoaded(
                namespace=request.namespace,
                pod=request.pod,
                lines=client.tail_logs(
                    request.namespace,
                    request.pod,
                    tail_lines=request.tail_lines,
                    on_spawn=on_spawn,
                ),
            )
        if isinstance(request, LookupService):
            return ServiceLookedUp(
                ip=request.ip,
                lines=client.find_services_by_ip(request.ip, on_spawn=on_spawn),
            )
        raise TypeError(f"not a kubectl request: {request!r}")

    @staticmethod
    def _failure(request: KubectlRequest, error: str) -> Result:
        if isinstance(request, FetchNamespaces):
            return NamespacesLoaded(error=error)
        if isinstance(request, DeleteNamespace):
            return NamespaceDeleted(namespace=request.namespace, error=error)
        if isinstance(request, FetchPods):
            return PodsLoaded(namespace=request.namespace, error=error)
        if isinstance(request, DeletePod):
            return PodDeleted(namespace=request.namespace, pod=request.pod, error=error)
        if isinstance(request, DescribePod):
            return PodDescribed(namespace=request.namespace, pod=request.pod, error=error)
        if isinstance(request, FetchLogs):
            return LogsLoaded(namespace=request.namespace, pod=request.pod, error=error)
        return ServiceLookedUp(ip=request.ip, error=error)
