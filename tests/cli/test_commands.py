"""Tests for show, url and environments commands."""

import pytest

from flavors.app import create_app
from flavors.cli.app import create_cli_app
from flavors.cli.state import CLIState
from flavors.config.settings import LogLevel, Settings
from flavors.domain.environment import Environment

QUIET = ["--log-level", "critical"]


@pytest.fixture
def staging_state(test_settings, registry):
    """CLIState whose App selects staging in a private registry."""
    return CLIState(
        test_settings,
        app_factory=lambda settings: create_app(settings, registry=registry),
    )


@pytest.fixture
def staging_app(staging_state):
    return create_cli_app(state=staging_state)


class TestShowCommand:
    def test_shows_environment_and_sample_urls(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, [*QUIET, "--env", "dev", "show"])

        assert result.exit_code == 0
        assert "🔵 Development" in result.output
        assert "https://dev-api.example.com/api/" in result.output
        assert "https://dev-api.example.com/api/movie/now_playing" in result.output
        assert "https://dev-api.example.com/api/movie/popular" in result.output

    def test_uses_injected_state(self, cli_runner, staging_app, registry):
        result = cli_runner.invoke(staging_app, ["show"])

        assert result.exit_code == 0
        assert "🟡 Staging" in result.output
        assert registry.is_staging is True

    def test_shows_timeouts(self, cli_runner, registry):
        settings = Settings(
            environment=Environment.PRODUCTION,
            log_level=LogLevel.CRITICAL,
            connection_timeout=12.5,
        )
        state = CLIState(
            settings,
            app_factory=lambda s: create_app(s, registry=registry),
        )

        result = cli_runner.invoke(create_cli_app(state=state), ["show"])

        assert result.exit_code == 0
        assert "connect 12.5s, receive 30s" in result.output


class TestUrlCommand:
    def run(self, cli_runner, app, args):
        result = cli_runner.invoke(app, ["url", *args])
        return result, result.output.splitlines()

    def test_builds_path(self, cli_runner, staging_app):
        result, lines = self.run(cli_runner, staging_app, ["movie", "popular"])

        assert result.exit_code == 0
        assert "https://staging-api.example.com/api/movie/popular" in lines

    def test_no_segments_prints_base_url(self, cli_runner, staging_app):
        result, lines = self.run(cli_runner, staging_app, [])

        assert result.exit_code == 0
        assert "https://staging-api.example.com/api/" in lines

    def test_resource_id_and_after(self, cli_runner, staging_app):
        result, lines = self.run(
            cli_runner, staging_app, ["movie", "--id", "550", "--after", "videos"]
        )

        assert result.exit_code == 0
        assert "https://staging-api.example.com/api/movie/550/videos" in lines

    def test_params_and_api_key(self, cli_runner, staging_app):
        result, lines = self.run(
            cli_runner,
            staging_app,
            ["search", "movie", "-p", "query=sci-fi & fantasy", "--with-key"],
        )

        assert result.exit_code == 0
        assert (
            "https://staging-api.example.com/api/search/movie"
            "?query=sci-fi%20%26%20fantasy&api_key=test-key"
        ) in lines

    def test_negative_id_fails(self, cli_runner, staging_app):
        result, _ = self.run(cli_runner, staging_app, ["movie", "--id=-1"])

        assert result.exit_code == 1

    def test_malformed_param_is_usage_error(self, cli_runner, staging_app):
        """A bad --param exits like a bad --env."""
        result, _ = self.run(cli_runner, staging_app, ["movie", "-p", "novalue"])

        assert result.exit_code == 2
        assert "key=value" in result.output

    def test_malformed_segment_fails(self, cli_runner, staging_app):
        result, _ = self.run(cli_runner, staging_app, ["movie?x"])

        assert result.exit_code == 1

    def test_env_option_end_to_end(self, cli_runner, default_app):
        result = cli_runner.invoke(
            default_app, [*QUIET, "--env", "prod", "url", "tv", "--id", "1399"]
        )

        assert result.exit_code == 0
        assert "https://api.example.com/api/tv/1399" in result.output.splitlines()


class TestEnvironmentsCommand:
    def test_lists_every_environment(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["environments"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("dev")
        assert "https://staging-api.example.com/api/" in lines[1]
        assert "logging=off debug=off" in lines[2]


class TestConsoleEntryPoint:
    def test_cli_runs_command_from_argv(self, monkeypatch, capsys):
        from flavors.cli import cli

        monkeypatch.setattr("sys.argv", ["flavors", "environments"])

        with pytest.raises(SystemExit) as exc_info:
            cli()

        assert exc_info.value.code == 0
        assert "https://api.example.com/api/" in capsys.readouterr().out
