"""kubectl CLI wrapper for namespace, pod, log and service queries.

Wraps the kubectl binary via subprocess. Every call returns parsed text
lines or raises a KubectlError; callers that need to terminate an
in-flight call early receive the process handle through ``on_spawn``.
"""

from __future__ import annotations

import json
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import structlog
from pydantic import ValidationError

from kube_helper.integrations.kubectl.exceptions import (
    KubectlBinaryNotFoundError,
    KubectlCommandError,
    KubectlError,
    KubectlTimeoutError,
)
from kube_helper.integrations.kubectl.models import ServiceSummary

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_TAIL_LINES = 50
NO_LOGS_PLACEHOLDER = "No logs yet..."
NO_DESCRIBE_PLACEHOLDER = "No describe output..."

SpawnCallback = Callable[[subprocess.Popen[str]], None]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def split_lines(output: str) -> list[str]:
    """Split command output into lines without trailing newlines."""
    return output.splitlines()


def filter_namespaces(names: list[str], search: str) -> list[str]:
    """Keep names containing ``search`` (case-insensitive), preserving order."""
    if not search:
        return list(names)
    needle = search.lower()
    return [name for name in names if needle in name.lower()]


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class KubectlClient:
    """Client for interacting with the kubectl CLI.

    Args:
        binary_path: Optional explicit path to kubectl. If None, PATH is
            searched; a missing binary is reported per call, not here.
        context: Optional kube context passed as ``--context``.
        timeout: Per-invocation timeout in seconds.
    """

    def __init__(
        self,
        binary_path: str | None = None,
        context: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._binary = self._find_binary(binary_path)
        self._context = context
        self._timeout = timeout
        self._log = logger.bind(binary=self._binary, context=context)
        self._log.debug("kubectl_client_initialized")

    @staticmethod
    def _find_binary(binary_path: str | None) -> str:
        """Locate the kubectl binary.

        Falls back to the bare name so that a missing binary surfaces as a
        per-call KubectlBinaryNotFoundError instead of a startup failure.
        """
        if binary_path:
            path = Path(binary_path).expanduser()
            return str(path.resolve()) if path.exists() else binary_path
        return shutil.which("kubectl") or "kubectl"

    @property
    def binary(self) -> str:
        """Resolved kubectl binary."""
        return self._binary

    def _build_command(self, *args: str) -> list[str]:
        cmd = [self._binary]
        if self._context:
            cmd.extend(["--context", self._context])
        cmd.extend(args)
        return cmd

    def _run(
        self,
        *args: str,
        merge_stderr: bool = False,
        on_spawn: SpawnCallback | None = None,
    ) -> str:
        """Run kubectl and return its standard output.

        Args:
            *args: kubectl arguments.
            merge_stderr: Capture stderr into the returned output.
            on_spawn: Called with the process handle right after it starts.

        Raises:
            KubectlBinaryNotFoundError: If kubectl cannot be executed.
            KubectlCommandError: If kubectl exits non-zero.
            KubectlTimeoutError: If the call exceeds the timeout.
        """
        cmd = self._build_command(*args)
        self._log.debug("running_kubectl", args=list(args))
        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                encoding="utf-8",
                # Pod logs may hold bytes that are not UTF-8
                errors="replace",
            )
        except FileNotFoundError as e:
            raise KubectlBinaryNotFoundError(self._binary) from e
        except OSError as e:
            raise KubectlError(message=f"failed to start kubectl: {e}", command=cmd) from e

        if on_spawn is not None:
            on_spawn(process)

        try:
            stdout, stderr = process.communicate(timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            process.kill()
            process.communicate()
            self._log.warning("kubectl_timeout", args=list(args), timeout=self._timeout)
            raise KubectlTimeoutError(cmd, self._timeout) from e

        if process.returncode != 0:
            detail = stdout if merge_stderr else stderr
            self._log.info(
                "kubectl_failed",
                args=list(args),
                returncode=process.returncode,
                stderr=detail,
            )
            raise KubectlCommandError(
                message=f"kubectl {args[0]} failed",
                command=cmd,
                returncode=process.returncode,
                stderr=detail,
            )
        return stdout or ""

    # =========================================================================
    # Namespaces
    # =========================================================================

    def list_namespaces(
        self,
        search: str = "",
        on_spawn: SpawnCallback | None = None,
    ) -> list[str]:
        """List namespace names, optionally filtered by a substring.

        Args:
            search: Case-insensitive substring filter; empty keeps all.
            on_spawn: Process handle callback.

        Returns:
            Namespace names in kubectl order.
        """
        output = self._run(
            "get",
            "namespaces",
            "-o",
            "jsonpath={.items[*].metadata.name}",
            on_spawn=on_spawn,
        )
        return filter_namespaces(output.split(), search)

    def delete_namespace(self, name: str, on_spawn: SpawnCallback | None = None) -> None:
        """Delete a namespace."""
        self._log.info("deleting_namespace", namespace=name)
        self._run("delete", "namespace", name, on_spawn=on_spawn)

    # =========================================================================
    # Pods
    # =========================================================================

    def list_pods(self, namespace: str, on_spawn: SpawnCallback | None = None) -> list[str]:
        """Return the raw ``kubectl get pods`` table (header included)."""
        return split_lines(self._run("get", "pods", "-n", namespace, on_spawn=on_spawn))

    def delete_pod(
        self,
        namespace: str,
        name: str,
        on_spawn: SpawnCallback | None = None,
    ) -> None:
        """Delete a pod."""
        self._log.info("deleting_pod", namespace=namespace, pod=name)
        self._run("delete", "pod", name, "-n", namespace, on_spawn=on_spawn)

    def describe_pod(
        self,
        namespace: str,
        name: str,
        on_spawn: SpawnCallback | None = None,
    ) -> list[str]:
        """Return ``kubectl describe pod`` output lines.

        An empty result is reported as a single placeholder line.
        """
        lines = split_lines(
            self._run("describe", "pod", name, "-n", namespace, merge_stderr=True, on_spawn=on_spawn)
        )
        return lines or [NO_DESCRIBE_PLACEHOLDER]

    def tail_logs(
        self,
        namespace: str,
        pod: str,
        tail_lines: int = DEFAULT_LOG_TAIL_LINES,
        on_spawn: SpawnCallback | None = None,
    ) -> list[str]:
        """Return the last ``tail_lines`` log lines of a pod.

        An empty result is reported as a single placeholder line.
        """
        lines = split_lines(
            self._run(
                "logs",
                f"--tail={tail_lines}",
                pod,
                "-n",
                namespace,
                merge_stderr=True,
                on_spawn=on_spawn,
            )
        )
        return lines or [NO_LOGS_PLACEHOLDER]

    # =========================================================================
    # Services
    # =========================================================================

    def find_services_by_ip(
        self,
        ip: str,
        on_spawn: SpawnCallback | None = None,
    ) -> list[str]:
        """Find services answering on ``ip`` across all namespaces.

        Returns:
            One display line per matching service; empty if none match.

        Raises:
            KubectlError: If kubectl fails or returns malformed JSON.
        """
        output = self._run("get", "services", "--all-namespaces", "-o", "json", on_spawn=on_spawn)
        try:
            items = json.loads(output or "{}").get("items") or []
            services = [ServiceSummary.from_k8s_object(item) for item in items]
        except (json.JSONDecodeError, AttributeError, TypeError, ValidationError) as e:
            raise KubectlError(message=f"unexpected kubectl output: {e}") from e

        matches = [svc.to_line() for svc in services if svc.matches_ip(ip)]
        self._log.debug("service_lookup_complete", ip=ip, matches=len(matches))
        return matches
