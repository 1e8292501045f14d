"""Core configuration for kube-helper."""
