"""Shared pytest fixtures for kube_helper tests."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner

from kube_helper.cli.main import app
from kube_helper.core.config import DashboardConfig
from kube_helper.integrations.kubectl import KubectlClient

POD_TABLE = [
    "NAME    READY   STATUS    RESTARTS   AGE",
    "web-1   1/1     Running   0          5m",
    "web-2   1/1     Running   0          5m",
    "db-0    1/1     Running   1          2d",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
refresh_interval: 5
log_tail_lines: 20
context: staging
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    # Clear any KUBE_HELPER_ prefixed environment variables
    for key in list(os.environ.keys()):
        if key.startswith("KUBE_HELPER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def capture_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Fixture to capture log output."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app


@pytest.fixture
def config() -> DashboardConfig:
    """Default dashboard configuration."""
    return DashboardConfig()


@pytest.fixture
def pod_table() -> list[str]:
    """``kubectl get pods`` output with three pods."""
    return list(POD_TABLE)


@pytest.fixture
def mock_kubectl(pod_table: list[str]) -> MagicMock:
    """A KubectlClient double with canned answers."""
    client = MagicMock(spec=KubectlClient)
    client.list_namespaces.return_value = ["default", "kube-system", "team-a"]
    client.list_pods.return_value = pod_table
    client.describe_pod.return_value = ["Name: web-1", "Namespace: team-a"]
    client.tail_logs.return_value = ["line 1", "line 2"]
    client.find_services_by_ip.return_value = ["team-a/web  ClusterIP  10.0.0.7  80/TCP"]
    return client


@pytest.fixture
def garbled_kubectl(tmp_path: Path) -> Path:
    """Executable kubectl stand-in that prints bytes which are not UTF-8."""
    script = tmp_path / "kubectl"
    script.write_bytes(b"#!/bin/sh\nprintf 'ok line\\n\\377\\376 binary garbage\\n'\n")
    script.chmod(0o755)
    return script
