"""
CLI Integration Tests
=====================

Tests the lollipops-fonts command line: configuration loading, automatic font
resolution and width measurement.
"""

import shutil

import pytest
import yaml
from click.testing import CliRunner

from lollipops.cli import cli


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


@pytest.mark.integration
class TestCLIIntegration:
    """CLI integration tests."""

    @pytest.fixture
    def runner(self):
        """Click test runner."""
        return CliRunner()

    @pytest.fixture
    def offline_config(self, tmp_path):
        """Config file with no reachable system fonts and downloads disabled."""
        config = {
            "fonts": {
                "system_candidates": [{"name": "Arial", "path": str(tmp_path / "nope.ttf")}],
                "cache_path": str(tmp_path / "OpenSans-Regular.ttf"),
                "download_enabled": False,
            },
            "drawing": {"dpi": 72},
        }
        config_path = tmp_path / "lollipops.yaml"
        with config_path.open("w") as f:
            yaml.dump(config, f)
        return config_path

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "resolve" in result.output
        assert "measure" in result.output

    def test_resolve_uses_cached_font(self, runner, offline_config, tmp_path, test_font_path):
        shutil.copy(test_font_path, tmp_path / "OpenSans-Regular.ttf")

        result = runner.invoke(cli, ["--config", str(offline_config), "resolve"])

        assert result.exit_code == 0
        assert _last_line(result.output) == "OpenSans"

    def test_resolve_fails_without_fonts(self, runner, offline_config):
        result = runner.invoke(cli, ["--config", str(offline_config), "resolve"])

        assert result.exit_code == 1
        assert "unable to find Arial.ttf" in result.output

    def test_measure_with_explicit_font(self, runner, offline_config, test_font_path):
        result = runner.invoke(
            cli,
            ["--config", str(offline_config), "measure", "AAAA", "--size", "20", "-f", str(test_font_path)],
        )

        assert result.exit_code == 0
        assert abs(int(_last_line(result.output)) - 40) <= 1

    def test_measure_dpi_override(self, runner, offline_config, test_font_path):
        result = runner.invoke(
            cli,
            [
                "--config",
                str(offline_config),
                "measure",
                "AAAA",
                "--size",
                "20",
                "--dpi",
                "144",
                "-f",
                str(test_font_path),
            ],
        )

        assert result.exit_code == 0
        assert abs(int(_last_line(result.output)) - 80) <= 2

    def test_measure_without_font_estimates(self, runner, offline_config):
        """With no usable font the width is the linear estimate."""
        result = runner.invoke(
            cli, ["--config", str(offline_config), "measure", "abc", "--size", "12"]
        )

        assert result.exit_code == 0
        assert _last_line(result.output) == "30"

    def test_invalid_config_file(self, runner, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("drawing:\n  dpi: 0\n")

        result = runner.invoke(cli, ["--config", str(config_path), "resolve"])

        assert result.exit_code == 1
        assert "Failed to load configuration" in result.output
