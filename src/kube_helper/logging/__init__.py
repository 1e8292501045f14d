"""Logging configuration for kube_helper."""

from kube_helper.logging.config import configure_logging

__all__ = ["configure_logging"]
