"""Tests for the relprofile command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from relprofile.cli import app
from relprofile.cli.common import setup_logging
from relprofile.core.config import get_settings
from relprofile.core.logging import get_logger

runner = CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "customers.csv").write_text("customer_id,name\n1,Ann\n2,Bob\n3,Cid\n")
    (directory / "orders.csv").write_text("order_id,customer_id\n10,1\n11,1\n12,3\n")
    return directory


@pytest.fixture
def people_csv(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text("name,city\nJohn Smith,Berlin\nJon Smith,Berlin\nMary Major,Paris\n")
    return path


class TestUCCCommand:
    """Tests for `relprofile ucc`."""

    def test_table_output(self, data_dir):
        result = runner.invoke(app, ["ucc", str(data_dir / "customers.csv")])
        assert result.exit_code == 0, result.output
        assert "customer_id" in result.output
        assert "Search Levels" in result.output

    def test_json_output(self, data_dir):
        result = runner.invoke(app, ["ucc", str(data_dir / "orders.csv"), "--json", "-w", "2"])
        assert result.exit_code == 0, result.output
        assert '"attribute_names"' in result.output
        assert '"order_id"' in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["ucc", str(tmp_path / "missing.csv")])
        assert result.exit_code != 0


class TestINDCommand:
    """Tests for `relprofile ind`."""

    def test_directory(self, data_dir):
        result = runner.invoke(app, ["ind", str(data_dir)])
        assert result.exit_code == 0, result.output
        assert "orders.customer_id" in result.output

    def test_json_output(self, data_dir):
        result = runner.invoke(
            app, ["ind", str(data_dir / "customers.csv"), str(data_dir / "orders.csv"), "--json"]
        )
        assert result.exit_code == 0, result.output
        assert '"dependent_relation"' in result.output

    def test_nary_fails(self, data_dir):
        result = runner.invoke(app, ["ind", str(data_dir), "--nary"])
        assert result.exit_code == 1
        assert "IND discovery failed" in result.output


class TestMatchCommand:
    """Tests for `relprofile match`."""

    def test_json_output(self, data_dir):
        result = runner.invoke(
            app,
            ["match", str(data_dir / "customers.csv"), str(data_dir / "orders.csv"), "--json"],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["source"] == "customers"
        assert len(payload["similarity_matrix"]) == 2
        assert "correspondences" in payload


class TestDedupCommand:
    """Tests for `relprofile dedup`."""

    def test_json_output(self, people_csv):
        result = runner.invoke(app, ["dedup", str(people_csv), "--key", "name", "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["relation"] == "people"
        assert [(d["index1"], d["index2"]) for d in payload["duplicates"]] == [(0, 1)]

    def test_unknown_key(self, people_csv):
        result = runner.invoke(app, ["dedup", str(people_csv), "--key", "nope"])
        assert result.exit_code == 1
        assert "Unknown sorting key" in result.output


@pytest.fixture
def fresh_settings():
    """Re-read RELPROFILE_* settings from the environment set up by the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSetupLogging:
    """Tests for settings-driven logging configuration."""

    def test_log_format_from_settings(self, monkeypatch, fresh_settings, capsys):
        monkeypatch.setenv("RELPROFILE_LOG_FORMAT", "json")
        setup_logging(0)
        get_logger("relprofile.test").warning("format_check")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "format_check"

    def test_log_level_from_settings(self, monkeypatch, fresh_settings, capsys):
        monkeypatch.setenv("RELPROFILE_LOG_LEVEL", "INFO")
        setup_logging(0)
        get_logger("relprofile.test").info("level_check")
        assert "level_check" in capsys.readouterr().err

    def test_verbosity_overrides_level(self, monkeypatch, fresh_settings, capsys):
        monkeypatch.setenv("RELPROFILE_LOG_LEVEL", "ERROR")
        setup_logging(1)
        get_logger("relprofile.test").info("verbose_check")
        assert "verbose_check" in capsys.readouterr().err

    def test_default_hides_info(self, fresh_settings, capsys):
        setup_logging(0)
        get_logger("relprofile.test").info("quiet_check")
        assert "quiet_check" not in capsys.readouterr().err
