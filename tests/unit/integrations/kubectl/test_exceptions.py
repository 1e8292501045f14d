"""Unit tests for kubectl exceptions."""

from __future__ import annotations

import pytest

from kube_helper.integrations.kubectl.exceptions import (
    KubectlBinaryNotFoundError,
    KubectlCommandError,
    KubectlError,
    KubectlTimeoutError,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubectlExceptions:
    """Tests for the kubectl exception hierarchy."""

    def test_str_with_message_only(self) -> None:
        """Plain message when nothing else is known."""
        assert str(KubectlError("boom")) == "boom"

    def test_str_includes_status_and_stderr(self) -> None:
        """Exit status and stripped stderr are appended."""
        error = KubectlCommandError(
            message="kubectl get failed",
            command=["kubectl", "get", "pods"],
            returncode=1,
            stderr="forbidden\n",
        )

        assert str(error) == "kubectl get failed (exit status 1) : forbidden"
        assert error.command == ["kubectl", "get", "pods"]

    def test_binary_not_found(self) -> None:
        """Names the binary and where to get it."""
        error = KubectlBinaryNotFoundError("/opt/kubectl")

        assert error.binary == "/opt/kubectl"
        assert "/opt/kubectl binary not found" in str(error)
        assert isinstance(error, KubectlError)

    def test_timeout(self) -> None:
        """Formats the timeout without trailing zeros."""
        error = KubectlTimeoutError(["kubectl", "logs"], 2.5)

        assert str(error) == "kubectl timed out after 2.5 seconds"
        assert error.timeout == 2.5
