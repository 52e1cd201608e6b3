"""Tests for ``sla-spine`` CLI commands."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from sla_spine import __version__
from sla_spine.cli.app import app
from sla_spine.ops.context import OperationContext
from sla_spine.ops.database import initialize_database
from sla_spine.ops.result import OperationError, OperationResult
from sla_spine.ops.sqlite_conn import SqliteConnection
from sla_spine.sla.repository import SlaSummaryRepository

runner = CliRunner()


def _make_error(message="Failed", code="INVALID_FILTER"):
    return OperationResult(success=False, error=OperationError(code=code, message=message))


@pytest.fixture()
def database(tmp_path, make_summary):
    """Path of a SQLite database seeded with one etl record."""
    path = str(tmp_path / "sla.db")
    conn = SqliteConnection(path)
    initialize_database(OperationContext(conn=conn))
    repo = SlaSummaryRepository(conn)
    repo.insert_summary(make_summary(id="1-W", parent_id="0-C"))
    repo.commit()
    conn.close()
    return path


class TestRoot:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestSlaList:
    def test_list_json(self, database):
        result = runner.invoke(app, ["sla", "list", "--filter", "app_name=etl", "-d", database, "--json"])
        assert result.exit_code == 0
        body = json.loads(result.stdout)
        assert [i["id"] for i in body["sla_summary_list"]] == ["1-W"]

    def test_list_table(self, database):
        result = runner.invoke(app, ["sla", "list", "-f", "event_status=ALL", "-d", database])
        assert result.exit_code == 0
        assert "1-W" in result.stdout

    def test_list_empty(self, database):
        result = runner.invoke(app, ["sla", "list", "-f", "app_name=none", "-d", database])
        assert result.exit_code == 0
        assert "No items" in result.stdout

    def test_filter_required(self, database):
        result = runner.invoke(app, ["sla", "list", "-d", database])
        assert result.exit_code != 0

    @patch("sla_spine.cli.sla._list")
    @patch("sla_spine.cli.sla.make_context")
    def test_error_exits_1(self, mock_ctx, mock_list):
        mock_ctx.return_value = (MagicMock(), MagicMock())
        mock_list.return_value = _make_error("Unknown filter key 'color'")

        result = runner.invoke(app, ["sla", "list", "-f", "color=red"])
        assert result.exit_code == 1
        mock_ctx.return_value[1].close.assert_called_once()


class TestSlaShow:
    def test_show_json(self, database):
        result = runner.invoke(app, ["sla", "show", "1-W", "-d", database, "--json", "-z", "GMT"])
        assert result.exit_code == 0
        body = json.loads(result.stdout)
        assert body["parent_id"] == "0-C"
        assert body["nominal_time"].endswith("GMT")
        assert "event_status" in body

    def test_show_without_event_status(self, database):
        result = runner.invoke(app, ["sla", "show", "1-W", "-d", database, "--json", "--no-event-status"])
        assert "event_status" not in json.loads(result.stdout)

    def test_show_not_found(self, database):
        result = runner.invoke(app, ["sla", "show", "nope", "-d", database])
        assert result.exit_code == 1


class TestDbInit:
    def test_init(self, tmp_path):
        path = tmp_path / "fresh.db"
        result = runner.invoke(app, ["db", "init", "-d", str(path), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"tables_created": ["sla_summary"]}
        assert path.exists()
