"""Tests for the leaseweb-provider CLI."""

import json

import pytest
from click.testing import CliRunner

from leaseweb_provider.__main__ import cli

TOKEN = "s3cr3t"
CLEAN_ENV = {"LEASEWEB_HOST": None, "LEASEWEB_SCHEME": None, "LEASEWEB_TOKEN": None}


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


def test_help_without_subcommand(runner):
    result = runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "check" in result.output


def test_metadata_json(runner):
    result = runner.invoke(cli, ["metadata", "--json-output"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["status"] == "ok"
    assert data["result"]["type_name"] == "leaseweb"


def test_schema_marks_token_sensitive(runner):
    result = runner.invoke(cli, ["schema", "--json-output"])
    assert result.exit_code == 0
    attributes = json.loads(result.output)["result"]["attributes"]
    assert attributes["token"]["sensitive"] is True

    result = runner.invoke(cli, ["schema"])
    assert "token (optional, sensitive)" in result.output


def test_capabilities(runner):
    result = runner.invoke(cli, ["capabilities", "--json-output"])
    assert result.exit_code == 0
    names = json.loads(result.output)["result"]
    assert len(names["data-source"]) == 15
    assert len(names["resource"]) == 16
    assert names["resource"][0] == "leaseweb_public_cloud_instance"


class TestCheck:
    def test_valid_environment(self, runner):
        env = {**CLEAN_ENV, "LEASEWEB_TOKEN": TOKEN}
        result = runner.invoke(cli, ["check"], env=env)
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "https://api.leaseweb.com" in result.output
        assert TOKEN not in result.output

    def test_missing_token(self, runner):
        result = runner.invoke(cli, ["check", "--json-output"], env=CLEAN_ENV)
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["status"] == "error"
        assert data["result"]["diagnostics"][0]["summary"] == "Missing Leaseweb API token"
        assert data["result"]["diagnostics"][0]["path"] == "token"

    def test_config_file(self, runner, tmp_path):
        path = tmp_path / "provider.yml"
        path.write_text(f"provider:\n  host: custom.example.com\n  token: {TOKEN}\n")
        env = {**CLEAN_ENV, "LEASEWEB_HOST": "other.example.com"}

        result = runner.invoke(cli, ["check", "--config", str(path), "--json-output"], env=env)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["result"]["base_url"] == "https://custom.example.com"
        assert TOKEN not in result.output

    def test_invalid_config_file(self, runner, tmp_path):
        path = tmp_path / "provider.yml"
        path.write_text("region: eu\n")
        result = runner.invoke(cli, ["check", "--config", str(path)], env=CLEAN_ENV)
        assert result.exit_code == 1
        assert "Unsupported provider attribute" in result.output
