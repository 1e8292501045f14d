"""kubectl integration - subprocess client, exceptions and display models."""

from kube_helper.integrations.kubectl.client import KubectlClient
from kube_helper.integrations.kubectl.exceptions import (
    KubectlBinaryNotFoundError,
    KubectlCommandError,
    KubectlError,
    KubectlTimeoutError,
)
from kube_helper.integrations.kubectl.models import ServicePort, ServiceSummary

__all__ = [
    "KubectlBinaryNotFoundError",
    "KubectlClient",
    "KubectlCommandError",
    "KubectlError",
    "KubectlTimeoutError",
    "ServicePort",
    "ServiceSummary",
]
