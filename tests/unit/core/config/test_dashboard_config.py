"""Unit tests for core config models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from kube_helper.core.config.models import DashboardConfig, load_config


@pytest.mark.unit
class TestDashboardConfig:
    """Tests for DashboardConfig model."""

    def test_defaults(self) -> None:
        """Defaults match the dashboard's timing and sizing."""
        config = DashboardConfig()
        assert config.refresh_interval == 2.0
        assert config.log_load_delay == 3.0
        assert config.log_tail_lines == 50
        assert config.max_pod_lines == 100
        assert config.kubectl_path is None
        assert config.context is None
        assert config.debug is False
        assert config.debug_log_file == "debug.log"

    def test_rejects_unknown_keys(self) -> None:
        """Typos in config files are reported."""
        with pytest.raises(ValidationError):
            DashboardConfig.model_validate({"refresh_intervall": 3})

    @pytest.mark.parametrize("field", ["refresh_interval", "command_timeout"])
    def test_rejects_non_positive_intervals(self, field: str) -> None:
        """Intervals must be positive."""
        with pytest.raises(ValidationError, match="must be positive"):
            DashboardConfig.model_validate({field: 0})

    def test_rejects_negative_delay(self) -> None:
        """A zero delay is fine, a negative one is not."""
        assert DashboardConfig(log_load_delay=0).log_load_delay == 0
        with pytest.raises(ValidationError):
            DashboardConfig(log_load_delay=-1)

    def test_rejects_zero_line_counts(self) -> None:
        """Line counts must be at least one."""
        with pytest.raises(ValidationError):
            DashboardConfig(log_tail_lines=0)


@pytest.mark.unit
class TestFromEnv:
    """Tests for environment overrides."""

    def test_env_overrides_base(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment values win over file values and are coerced."""
        monkeypatch.setenv("KUBE_HELPER_REFRESH_INTERVAL", "5")
        monkeypatch.setenv("KUBE_HELPER_CONTEXT", "prod")

        config = DashboardConfig.from_env({"refresh_interval": 10, "context": "dev"})

        assert config.refresh_interval == 5.0
        assert config.context == "prod"

    def test_debug_env_enables_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Any non-empty DEBUG value turns on diagnostics."""
        monkeypatch.setenv("DEBUG", "1")
        assert DashboardConfig.from_env().debug is True

    def test_empty_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Empty variables do not override."""
        monkeypatch.setenv("KUBE_HELPER_KUBECTL", "")
        monkeypatch.setenv("DEBUG", "")

        config = DashboardConfig.from_env({"kubectl_path": "/opt/kubectl"})

        assert config.kubectl_path == "/opt/kubectl"
        assert config.debug is False

    def test_invalid_env_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Bad numbers surface as validation errors."""
        monkeypatch.setenv("KUBE_HELPER_LOG_TAIL_LINES", "lots")
        with pytest.raises(ValidationError):
            DashboardConfig.from_env()


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """No file means defaults plus environment."""
        config = load_config(tmp_path / "missing.yaml")
        assert config == DashboardConfig()

    def test_reads_yaml(self, temp_config_file: Path) -> None:
        """Values are read from the YAML file."""
        config = load_config(temp_config_file)

        assert config.refresh_interval == 5.0
        assert config.log_tail_lines == 20
        assert config.context == "staging"

    def test_env_beats_yaml(
        self, temp_config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Environment variables take precedence over the file."""
        monkeypatch.setenv("KUBE_HELPER_LOG_TAIL_LINES", "200")

        assert load_config(temp_config_file).log_tail_lines == 200

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file is treated as no settings."""
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == DashboardConfig()

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """A YAML list is not a valid config."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(path)
