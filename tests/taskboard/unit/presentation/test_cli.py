"""Tests for the typer CLI."""

from unittest.mock import Mock, patch

from typer.testing import CliRunner

from taskboard.presentation.cli import app as cli_module
from taskboard_config.settings import Settings

runner = CliRunner()


class TestSecretsGenerate:
    def test_prints_a_fresh_signing_secret(self):
        first = runner.invoke(cli_module.app, ["secrets", "generate"])
        second = runner.invoke(cli_module.app, ["secrets", "generate"])

        assert first.exit_code == 0
        assert "JWT_SECRET_KEY=" in first.output

        def secret(output: str) -> str:
            line = next(ln for ln in output.splitlines() if "JWT_SECRET_KEY=" in ln)
            return line.split("=", 1)[1].strip()

        assert len(secret(first.output)) >= 64
        assert secret(first.output) != secret(second.output)


def _served_app(exit_code: int = 0) -> Mock:
    api = Mock()
    api.state.exit_code = exit_code
    return api


class TestServe:
    def test_runs_app_with_settings_defaults(self):
        settings = Settings(_env_file=None, api_host="127.0.0.1", api_port=4000)
        api = _served_app()

        with (
            patch.object(cli_module, "get_settings", return_value=settings),
            patch.object(cli_module, "create_app", return_value=api) as factory,
            patch.object(cli_module.uvicorn, "run") as run,
        ):
            result = runner.invoke(cli_module.app, ["serve"])

        assert result.exit_code == 0
        factory.assert_called_once_with(settings)
        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == (api,)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 4000

    def test_options_override_settings(self):
        settings = Settings(_env_file=None)

        with (
            patch.object(cli_module, "get_settings", return_value=settings),
            patch.object(cli_module, "create_app", return_value=_served_app()),
            patch.object(cli_module.uvicorn, "run") as run,
        ):
            result = runner.invoke(cli_module.app, ["serve", "--port", "8080"])

        assert result.exit_code == 0
        assert run.call_args.kwargs["port"] == 8080
        assert run.call_args.kwargs["host"] == settings.api_host

    def test_fatal_startup_exits_with_code_1(self):
        settings = Settings(_env_file=None)

        with (
            patch.object(cli_module, "get_settings", return_value=settings),
            patch.object(cli_module, "create_app", return_value=_served_app(exit_code=1)),
            patch.object(cli_module.uvicorn, "run"),
        ):
            result = runner.invoke(cli_module.app, ["serve"])

        assert result.exit_code == 1

    def test_reload_uses_app_factory(self):
        settings = Settings(_env_file=None)

        with (
            patch.object(cli_module, "get_settings", return_value=settings),
            patch.object(cli_module, "create_app") as factory,
            patch.object(cli_module.uvicorn, "run") as run,
        ):
            result = runner.invoke(cli_module.app, ["serve", "--reload"])

        assert result.exit_code == 0
        factory.assert_not_called()
        args, kwargs = run.call_args
        assert args == ("taskboard.presentation.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["reload"] is True
