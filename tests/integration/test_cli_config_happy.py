# tests/integration/test_cli_config_happy.py
# Integration tests for CLI config commands happy paths w/ isolated home

import json
from pathlib import Path

from typer.testing import CliRunner

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


# * Ensure config path command returns isolated temp config location
def test_config_path_returns_isolated_temp_path(isolate_config):
    from pacer.cli.app import app

    result = CliRunner().invoke(app, ["config", "path"], env=ENV)
    assert result.exit_code == 0

    output = result.stdout.strip()
    assert ".pacer" in output
    assert Path(output).exists()


# * Ensure config set key value → config get key returns same value
def test_config_set_get_round_trip(isolate_config):
    from pacer.cli.app import app

    runner = CliRunner()
    result = runner.invoke(app, ["config", "set", "tick_ms", "250"], env=ENV)
    assert result.exit_code == 0

    result = runner.invoke(app, ["config", "get", "tick_ms"], env=ENV)
    assert result.exit_code == 0
    assert result.stdout.strip() == "250"

    result = runner.invoke(app, ["config", "set", "exact_match", "false"], env=ENV)
    assert result.exit_code == 0
    result = runner.invoke(app, ["config", "get", "exact_match"], env=ENV)
    assert result.stdout.strip() == "false"

    result = runner.invoke(app, ["config", "set", "output_dir", "runs"], env=ENV)
    assert result.exit_code == 0
    result = runner.invoke(app, ["config", "get", "output_dir"], env=ENV)
    assert result.stdout.strip() == '"runs"'


# * Ensure set persists to the isolated config file
def test_config_set_persists(isolate_config):
    from pacer.cli.app import app

    CliRunner().invoke(app, ["config", "set", "speed", "2.5"], env=ENV)
    data = json.loads((isolate_config / ".pacer" / "config.json").read_text())
    assert data["speed"] == 2.5


# * Ensure config list & bare config show every setting
def test_config_list_and_default(isolate_config):
    from pacer.cli.app import app

    runner = CliRunner()
    for args in (["config", "list"], ["config"]):
        result = runner.invoke(app, args, env=ENV)
        assert result.exit_code == 0
        assert "Current Configuration" in result.stdout
        assert "bpm_tolerance_percent" in result.stdout


# * Ensure reset restores defaults
def test_config_reset(isolate_config):
    from pacer.cli.app import app

    runner = CliRunner()
    runner.invoke(app, ["config", "set", "alternatives", "0"], env=ENV)
    result = runner.invoke(app, ["config", "reset"], env=ENV)
    assert result.exit_code == 0
    result = runner.invoke(app, ["config", "get", "alternatives"], env=ENV)
    assert result.stdout.strip() == "3"
