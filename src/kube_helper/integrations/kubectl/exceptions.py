"""kubectl integration custom exceptions."""

from __future__ import annotations


class KubectlError(Exception):
    """Base exception for kubectl invocations.

    Attributes:
        message: Human-readable error message.
        command: The argument vector that was executed (if any).
        returncode: Process exit status (if the process ran).
        stderr: Captured error output (if any).
    """

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        """Initialize KubectlError.

        Args:
            message: Human-readable error message.
            command: The argument vector that was executed.
            returncode: Process exit status.
            stderr: Captured error output.
        """
        super().__init__(message)
        self.message = message
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.returncode is not None:
            parts.append(f"(exit status {self.returncode})")
        if self.stderr:
            parts.append(f": {self.stderr.strip()}")
        return " ".join(parts)


class KubectlBinaryNotFoundError(KubectlError):
    """Raised when the kubectl binary cannot be started."""

    def __init__(self, binary: str = "kubectl") -> None:
        """Initialize KubectlBinaryNotFoundError.

        Args:
            binary: The binary name or path that could not be executed.
        """
        super().__init__(
            message=(
                f"{binary} binary not found. "
                "Install from: https://kubernetes.io/docs/tasks/tools/"
            ),
        )
        self.binary = binary


class KubectlCommandError(KubectlError):
    """Raised when kubectl exits with a non-zero status."""


class KubectlTimeoutError(KubectlError):
    """Raised when a kubectl invocation exceeds its timeout."""

    def __init__(self, command: list[str], timeout: float) -> None:
        """Initialize KubectlTimeoutError.

        Args:
            command: The argument vector that timed out.
            timeout: The timeout in seconds.
        """
        super().__init__(
            message=f"kubectl timed out after {timeout:g} seconds",
            command=command,
        )
        self.timeout = timeout
