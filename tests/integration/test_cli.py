"""Integration tests for the rekompenco CLI (click CliRunner, tmp_path files)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from rekompenco.cli.main import cli
from rekompenco.core.constants import ExitCode


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    return tmp_path / "store" / "ach.rkpc"


def _run(runner: CliRunner, store_file: Path, *args: str):
    return runner.invoke(cli, ["--store", str(store_file), *args], catch_exceptions=False)


# ---------------------------------------------------------------------------
# unlock / has / list
# ---------------------------------------------------------------------------


class TestUnlock:
    def test_unlock_then_has(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(
            runner, store_file, "unlock", "first_blood", "First Blood", "-d", "Kill one enemy"
        )
        assert result.exit_code == 0
        assert "Unlocked" in result.output
        assert store_file.read_text(encoding="utf-8").splitlines() == [
            "first_blood|First Blood|Kill one enemy|0|"
        ]

        result = _run(runner, store_file, "has", "first_blood")
        assert result.exit_code == 0
        assert "unlocked" in result.output

    def test_unlock_twice(self, runner: CliRunner, store_file: Path) -> None:
        _run(runner, store_file, "unlock", "a", "A")
        result = _run(runner, store_file, "unlock", "a", "Other")
        assert result.exit_code == 0
        assert "Already unlocked" in result.output
        assert len(store_file.read_text().splitlines()) == 1

    def test_unlock_with_payload(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(
            runner, store_file, "unlock", "g", "Gold", "--data-type", "2", "--data", "aW1n"
        )
        assert result.exit_code == 0
        assert store_file.read_text().splitlines() == ["g|Gold||2|aW1n"]

    def test_unlock_rejects_delimiter(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(runner, store_file, "unlock", "a", "bad|name")
        assert result.exit_code == ExitCode.ERROR
        assert store_file.read_text() == ""

    def test_unlock_rejects_oversized(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(runner, store_file, "unlock", "a", "A", "--data", "x" * 600)
        assert result.exit_code == ExitCode.ERROR
        assert store_file.read_text() == ""

    def test_data_type_range_checked(self, runner: CliRunner, store_file: Path) -> None:
        result = runner.invoke(
            cli, ["--store", str(store_file), "unlock", "a", "A", "--data-type", "70000"]
        )
        assert result.exit_code == 2


class TestHas:
    def test_missing_id(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(runner, store_file, "has", "nope")
        assert result.exit_code == ExitCode.ERROR
        assert "locked" in result.output
        assert store_file.exists()

    def test_malformed_file(self, runner: CliRunner, store_file: Path) -> None:
        store_file.parent.mkdir(parents=True)
        store_file.write_text("a|A|d|0|\nbroken\n", encoding="utf-8")
        result = _run(runner, store_file, "has", "a")
        assert result.exit_code == ExitCode.STORE_ERROR
        assert "line 1" in result.output

    def test_undecodable_bytes_still_load(self, runner: CliRunner, store_file: Path) -> None:
        store_file.parent.mkdir(parents=True)
        store_file.write_bytes(b"a|A\xff|d|0|\n")
        result = _run(runner, store_file, "has", "a")
        assert result.exit_code == 0
        assert "unlocked" in result.output


class TestList:
    def test_empty(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(runner, store_file, "list")
        assert result.exit_code == 0
        assert "No achievements unlocked yet" in result.output

    def test_table(self, runner: CliRunner, store_file: Path) -> None:
        _run(runner, store_file, "unlock", "b", "Bravo")
        _run(runner, store_file, "unlock", "a", "Alpha")
        result = _run(runner, store_file, "list")
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "Bravo" in result.output

    def test_json(self, runner: CliRunner, store_file: Path) -> None:
        _run(runner, store_file, "unlock", "b", "Bravo")
        _run(runner, store_file, "unlock", "a", "Alpha", "-d", "first")
        result = _run(runner, store_file, "list", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [d["id"] for d in data] == ["a", "b"]
        assert data[0]["description"] == "first"

    def test_bad_data_type_in_file(self, runner: CliRunner, store_file: Path) -> None:
        store_file.parent.mkdir(parents=True)
        store_file.write_text("a|A|d|abc|\n", encoding="utf-8")
        result = _run(runner, store_file, "list")
        assert result.exit_code == ExitCode.STORE_ERROR
        assert "invalid data type" in result.output


# ---------------------------------------------------------------------------
# path / info
# ---------------------------------------------------------------------------


class TestInfo:
    def test_path_uses_platform_default(self, runner: CliRunner, isolated_app_data: Path) -> None:
        result = runner.invoke(cli, ["path"], catch_exceptions=False)
        assert result.exit_code == 0
        assert result.stdout.strip() == str(
            isolated_app_data / "Rekompenco" / "default_rekompenco.rkpc"
        )

    def test_info_missing_file_not_created(self, runner: CliRunner, store_file: Path) -> None:
        result = _run(runner, store_file, "info", "--json")
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"path": str(store_file), "exists": False}
        assert not store_file.exists()

    def test_info_counts(self, runner: CliRunner, store_file: Path) -> None:
        _run(runner, store_file, "unlock", "a", "A")
        _run(runner, store_file, "unlock", "b", "B")
        result = _run(runner, store_file, "info", "--json")
        data = json.loads(result.stdout)
        assert data["exists"] is True
        assert data["achievements"] == 2
        assert data["size_bytes"] == store_file.stat().st_size


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_init_then_show(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "config.toml"
        env = {"REKOMPENCO_CONFIG": str(cfg)}

        result = runner.invoke(cli, ["config", "init"], env=env, catch_exceptions=False)
        assert result.exit_code == 0
        assert cfg.exists()

        result = runner.invoke(cli, ["config", "show"], env=env, catch_exceptions=False)
        assert result.exit_code == 0
        assert "WARNING" in result.output

    def test_missing_explicit_config(self, runner: CliRunner, tmp_path: Path) -> None:
        env = {"REKOMPENCO_CONFIG": str(tmp_path / "missing.toml")}
        result = runner.invoke(cli, ["list"], env=env)
        assert result.exit_code == ExitCode.CONFIG_ERROR

    def test_init_default_location(self, runner: CliRunner, isolated_app_data: Path) -> None:
        result = runner.invoke(cli, ["config", "init"], catch_exceptions=False)
        assert result.exit_code == 0
        cfg = isolated_app_data / "Rekompenco" / "config.toml"
        assert cfg.exists()

        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == ExitCode.ERROR
        assert "already exists" in result.output

        result = runner.invoke(cli, ["config", "init", "--force"], catch_exceptions=False)
        assert result.exit_code == 0

    def test_show_json(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "config.toml"
        cfg.write_text('[store]\npath = "/tmp/x.rkpc"\n', encoding="utf-8")
        result = runner.invoke(
            cli, ["config", "show", "--json"], env={"REKOMPENCO_CONFIG": str(cfg)}
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["store"]["path"] == "/tmp/x.rkpc"
        assert data["_config_path"] == str(cfg)

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "config.toml"
        cfg.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
        result = runner.invoke(cli, ["list"], env={"REKOMPENCO_CONFIG": str(cfg)})
        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Config error" in result.output


class TestVersion:
    def test_version_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version", "--json"], catch_exceptions=False)
        assert result.exit_code == 0
        assert "rekompenco" in json.loads(result.stdout)
