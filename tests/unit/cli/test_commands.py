"""
CLI commands that do not need note data: server, health, system and the
root callback. HTTP calls are replaced by AsyncMock responses and uvicorn
by a patched subprocess.run.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from typer.testing import CliRunner

from voicenotes.cli.main import app

runner = CliRunner()

HEALTH_GET = "voicenotes.cli.commands.health.APIClient.get"


def _backend_returns(status: int, body: dict):
    return patch(HEALTH_GET, new_callable=AsyncMock, return_value=httpx.Response(status, json=body))


def _backend_down():
    return patch(HEALTH_GET, new_callable=AsyncMock, side_effect=httpx.ConnectError("refused"))


class TestRootCallback:
    def test_no_arguments_prints_help(self) -> None:
        result = runner.invoke(app, [])

        assert "Voice Notes CLI" in result.output

    @pytest.mark.parametrize("flags", [[], ["-v"], ["--verbose"]])
    def test_quiet_and_verbose_runs(self, flags) -> None:
        result = runner.invoke(app, [*flags, "system", "version"])

        assert result.exit_code == 0
        assert "Debug mode enabled" not in result.stdout

    def test_debug_announces_itself(self) -> None:
        result = runner.invoke(app, ["-d", "system", "version"])

        assert result.exit_code == 0
        assert "Debug mode enabled" in result.stdout

    def test_every_group_is_registered(self) -> None:
        result = runner.invoke(app, ["--help"])

        for group in ("server", "health", "system", "notes"):
            assert group in result.stdout

    def test_notes_group_lists_its_commands(self) -> None:
        result = runner.invoke(app, ["notes", "--help"])

        for command in ("list", "add", "edit", "delete", "share"):
            assert command in result.stdout


class TestHealthPing:
    def test_reachable(self) -> None:
        with _backend_returns(200, {"status": "healthy"}):
            result = runner.invoke(app, ["health", "ping"])

        assert result.exit_code == 0
        assert "Backend is reachable" in result.stdout

    def test_unreachable_exits_1(self) -> None:
        with _backend_down():
            result = runner.invoke(app, ["health", "ping"])

        assert result.exit_code == 1
        assert "not reachable" in result.stdout


class TestHealthStatus:
    def test_healthy_summary(self) -> None:
        with _backend_returns(200, {"status": "healthy", "checks": {}}):
            result = runner.invoke(app, ["health", "status"])

        assert result.exit_code == 0
        assert "HEALTHY" in result.stdout

    def test_503_body_is_read_from_detail(self) -> None:
        with _backend_returns(503, {"detail": {"status": "unhealthy", "checks": {}}}):
            result = runner.invoke(app, ["health", "status"])

        assert result.exit_code == 1
        assert "UNHEALTHY" in result.stdout

    def test_detailed_table_lists_components(self) -> None:
        report = {
            "status": "healthy",
            "checks": {"repository": {"status": "healthy", "notes": 4, "latency_ms": 0}},
            "application": {"name": "Voice Notes", "version": "0.1.0"},
        }
        with _backend_returns(200, report) as get:
            result = runner.invoke(app, ["health", "status", "--detailed"])

        assert result.exit_code == 0
        get.assert_awaited_once_with("/health/detailed")
        assert "repository" in result.stdout
        assert "notes: 4" in result.stdout
        assert "Voice Notes v0.1.0" in result.stdout

    def test_connection_error_exits_1(self) -> None:
        with _backend_down():
            result = runner.invoke(app, ["health", "status"])

        assert result.exit_code == 1
        assert "Cannot connect to backend" in result.stdout


class TestSystem:
    def test_info_panel(self) -> None:
        result = runner.invoke(app, ["system", "info"])

        assert result.exit_code == 0
        assert "Voice Notes" in result.stdout
        assert "/api" in result.stdout

    def test_version(self) -> None:
        result = runner.invoke(app, ["system", "version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_single_section(self) -> None:
        result = runner.invoke(app, ["system", "config", "messaging"])

        assert result.exit_code == 0
        assert "simulated_delay_seconds" in result.stdout
        assert "api_prefix" not in result.stdout

    def test_all_sections(self) -> None:
        result = runner.invoke(app, ["system", "config"])

        for section in ("application", "logging", "messaging"):
            assert section in result.stdout

    def test_unknown_section_exits_1(self) -> None:
        result = runner.invoke(app, ["system", "config", "database"])

        assert result.exit_code == 1
        assert "Unknown section: database" in result.stdout


class TestServerStart:
    def test_command_line_overrides_config(self) -> None:
        with patch("voicenotes.cli.commands.server.subprocess.run") as run:
            result = runner.invoke(app, ["server", "start", "-h", "0.0.0.0", "-p", "9000", "-r"])

        assert result.exit_code == 0
        command = run.call_args.args[0]
        assert command[command.index("--host") + 1] == "0.0.0.0"
        assert command[command.index("--port") + 1] == "9000"
        assert command[-1] == "--reload"
        assert "voicenotes.backend.main:app" in command

    def test_defaults_come_from_application_yaml(self) -> None:
        with patch("voicenotes.cli.commands.server.subprocess.run") as run:
            runner.invoke(app, ["server", "start"])

        command = run.call_args.args[0]
        assert command[command.index("--host") + 1] == "127.0.0.1"
        assert command[command.index("--port") + 1] == "8000"
        assert "--reload" not in command
