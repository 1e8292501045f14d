"""Command line interface for kube-helper."""
