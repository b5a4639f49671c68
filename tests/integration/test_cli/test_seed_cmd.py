"""Integration tests for the `election-api seed` and `db` CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

from typer.testing import CliRunner

from election_api.cli.app import app
from election_api.core.exceptions import StorageError
from election_api.services.fixture_service import FixtureLoadResult

runner = CliRunner()

_FIXTURES = {
    "elections": [
        {
            "id": 1,
            "name": "Gemeenteraadsverkiezingen 2026",
            "location": "Heemdamseburg",
            "election_date": "2026-03-18",
            "nomination_date": "2026-02-02",
        }
    ],
    "polling_stations": [
        {
            "id": 1,
            "election_id": 1,
            "name": 'Stembureau "Op Rolletjes"',
            "number": 33,
            "polling_station_type": "Mobile",
            "street": "Rijdendeweg",
            "house_number": "1",
            "postal_code": "1234 YQ",
            "locality": "Den Haag",
        }
    ],
}


def _write_fixtures(tmp_path: Path, document: object = _FIXTURES) -> Path:
    path = tmp_path / "fixtures.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestSeedCommand:
    """Tests for `election-api seed`."""

    def test_seeds_sqlite_database(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """End to end against a file-backed SQLite database."""
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'election.db'}")
        fixture_file = _write_fixtures(tmp_path)

        result = runner.invoke(app, ["seed", str(fixture_file), "--create-tables"])

        assert result.exit_code == 0, result.output
        assert "Loaded 1 election(s) and 1 polling station(s)" in result.output

    def test_invalid_fixture_exits_1(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'election.db'}")
        fixture_file = _write_fixtures(tmp_path, {"polling_stations": [{"name": "incomplete"}]})

        result = runner.invoke(app, ["seed", str(fixture_file), "--create-tables"])

        assert result.exit_code == 1

    def test_storage_error_exits_2(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        fixture_file = _write_fixtures(tmp_path)

        with patch(
            "election_api.cli.seed_cmd._run_seed",
            new_callable=AsyncMock,
            side_effect=StorageError("Storage failure while loading fixtures"),
        ):
            result = runner.invoke(app, ["seed", str(fixture_file)])

        assert result.exit_code == 2

    def test_reports_counts(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        fixture_file = _write_fixtures(tmp_path)

        with patch(
            "election_api.cli.seed_cmd._run_seed",
            new_callable=AsyncMock,
            return_value=FixtureLoadResult(elections=2, polling_stations=3),
        ):
            result = runner.invoke(app, ["seed", str(fixture_file)])

        assert result.exit_code == 0
        assert "Loaded 2 election(s) and 3 polling station(s)" in result.output

    def test_missing_file_is_usage_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        result = runner.invoke(app, ["seed", str(tmp_path / "nope.json")])
        assert result.exit_code == 2


class TestDbCommand:
    """Tests for `election-api db`."""

    def test_missing_alembic_config_exits_1(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        result = runner.invoke(app, ["db", "upgrade", "--config", str(tmp_path / "alembic.ini")])
        assert result.exit_code == 1
        assert "Alembic config not found" in result.output

    def test_upgrade_runs_alembic(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        ini = tmp_path / "alembic.ini"
        ini.write_text("[alembic]\nscript_location = alembic\n", encoding="utf-8")

        with patch("alembic.command.upgrade") as mock_upgrade:
            result = runner.invoke(app, ["db", "upgrade", "--config", str(ini)])

        assert result.exit_code == 0, result.output
        mock_upgrade.assert_called_once()
        assert mock_upgrade.call_args.args[1] == "head"
