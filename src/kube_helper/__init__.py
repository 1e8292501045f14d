"""kube-helper: interactive terminal dashboard for Kubernetes namespaces and pods."""

__version__ = "0.1.0"
