"""Dashboard configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, field_validator

logger = structlog.get_logger()

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "kube-helper"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Environment variable -> config field
ENV_OVERRIDES: dict[str, str] = {
    "KUBE_HELPER_KUBECTL": "kubectl_path",
    "KUBE_HELPER_CONTEXT": "context",
    "KUBE_HELPER_REFRESH_INTERVAL": "refresh_interval",
    "KUBE_HELPER_LOG_LOAD_DELAY": "log_load_delay",
    "KUBE_HELPER_LOG_TAIL_LINES": "log_tail_lines",
    "KUBE_HELPER_COMMAND_TIMEOUT": "command_timeout",
}


class DashboardConfig(BaseModel):
    """Runtime settings for the dashboard."""

    model_config = ConfigDict(extra="forbid")

    kubectl_path: str | None = None
    context: str | None = None
    refresh_interval: float = 2.0
    log_load_delay: float = 3.0
    log_tail_lines: int = 50
    max_pod_lines: int = 100
    command_timeout: float = 30.0
    debug: bool = False
    debug_log_file: str = "debug.log"

    @field_validator("refresh_interval", "command_timeout")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate intervals are positive."""
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("log_load_delay")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        """Validate delay is non-negative."""
        if v < 0:
            raise ValueError("log_load_delay must be non-negative")
        return v

    @field_validator("log_tail_lines", "max_pod_lines")
    @classmethod
    def validate_line_counts(cls, v: int) -> int:
        """Validate line counts are at least 1."""
        if v < 1:
            raise ValueError("line counts must be at least 1")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> DashboardConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            DEBUG: Any non-empty value enables diagnostic file logging
            KUBE_HELPER_KUBECTL: Path to the kubectl binary
            KUBE_HELPER_CONTEXT: Kube context passed to every kubectl call
            KUBE_HELPER_REFRESH_INTERVAL: Seconds between refresh ticks
            KUBE_HELPER_LOG_LOAD_DELAY: Seconds before a new log panel's first fetch
            KUBE_HELPER_LOG_TAIL_LINES: Number of log lines fetched per pod
            KUBE_HELPER_COMMAND_TIMEOUT: Per-call kubectl timeout in seconds
        """
        config_dict = base_config.copy() if base_config else {}

        for env_name, field in ENV_OVERRIDES.items():
            if value := os.environ.get(env_name):
                config_dict[field] = value

        if os.environ.get("DEBUG"):
            config_dict["debug"] = True

        return cls.model_validate(config_dict)


def load_config(path: Path | None = None) -> DashboardConfig:
    """Load configuration from YAML (if present) and the environment.

    Args:
        path: Config file path. Defaults to ~/.config/kube-helper/config.yaml.

    Returns:
        Validated configuration.
    """
    config_path = path or CONFIG_FILE
    base: dict[str, Any] = {}
    if config_path.exists():
        loaded = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{config_path} must contain a mapping")
        base = loaded
        logger.debug("config_file_loaded", path=str(config_path))
    return DashboardConfig.from_env(base)
