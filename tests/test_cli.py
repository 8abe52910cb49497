"""
Tests for the oembed CLI module.
"""

import contextlib
import importlib
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from oembed_resolver.cli import load_commands, main
from oembed_resolver.plugins.cli import fetch as fetch_plugin
from oembed_resolver.plugins.cli import providers as providers_plugin


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patch_transport(monkeypatch, stub_transport):
    """Replace RequestsTransport in a plugin module with a stub transport."""

    def _patch(module, **kwargs):
        transport = stub_transport(**kwargs)

        class _Factory:
            @staticmethod
            def from_settings(settings):
                return contextlib.nullcontext(transport)

        monkeypatch.setattr(module, "RequestsTransport", _Factory)
        return transport

    return _patch


class TestCLICore:
    """Test cases for core CLI functionality."""

    def test_main_cli_group_creation(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "oEmbed provider lookup" in result.output

    def test_plugin_commands_registered(self, runner):
        result = runner.invoke(main, ["--help"])

        for command in ("match", "fetch", "providers", "config", "info"):
            assert command in result.output

    def test_cli_with_log_level_option(self, runner):
        result = runner.invoke(main, ["--log-level", "DEBUG", "--help"])
        assert result.exit_code == 0

    def test_missing_catalog_file(self, runner, temp_dir):
        result = runner.invoke(
            main, ["--catalog", str(temp_dir / "nope.json"), "match", "https://x"]
        )
        assert result.exit_code != 0

    @patch("oembed_resolver.cli.logger")
    def test_load_commands_with_plugin_error(self, mock_logger):
        with patch("oembed_resolver.cli.importlib.import_module") as mock_import:
            mock_import.side_effect = ImportError("Test import error")

            load_commands()

            mock_logger.error.assert_called()

    @patch("oembed_resolver.cli.logger")
    def test_load_commands_skips_only_broken_plugin(self, mock_logger):
        real_import = importlib.import_module
        imported = []

        def _import(name):
            if name.endswith(".match"):
                raise ImportError("broken plugin")
            imported.append(name)
            return real_import(name)

        with patch("oembed_resolver.cli.importlib.import_module", side_effect=_import):
            load_commands()

        assert "oembed_resolver.plugins.cli.fetch" in imported
        assert "oembed_resolver.plugins.cli.info" in imported
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[0][1] == "oembed_resolver.plugins.cli.match"


class TestMatchCommand:
    """Test cases for the match command."""

    def test_match_from_catalog_file(self, runner, catalog_file):
        result = runner.invoke(
            main, ["--catalog", str(catalog_file), "match", "https://media.example/b/1"]
        )

        assert result.exit_code == 0
        assert "Provider: First" in result.output
        assert "Endpoint: https://first.example/oembed" in result.output
        assert "Scheme:   https://media.example/*" in result.output

    def test_match_included_catalog(self, runner):
        result = runner.invoke(main, ["match", "https://youtu.be/5mMOsl8qpfc"])

        assert result.exit_code == 0
        assert "YouTube" in result.output

    def test_match_unsupported(self, runner, catalog_file):
        result = runner.invoke(
            main, ["--catalog", str(catalog_file), "match", "https://unknown.example"]
        )

        assert result.exit_code == 1
        assert "No provider supports" in result.output


class TestFetchCommand:
    """Test cases for the fetch command."""

    def test_fetch_single(self, runner, patch_transport, photo_json):
        transport = patch_transport(fetch_plugin, body=photo_json)

        result = runner.invoke(
            main, ["fetch", "http://www.flickr.com/photos/bees/2341623661/"]
        )

        assert result.exit_code == 0
        assert "ZB8T0193" in result.output
        assert "240x160" in result.output
        assert len(transport.requested) == 1

    def test_fetch_json(self, runner, patch_transport, photo_json, photo_payload):
        patch_transport(fetch_plugin, body=photo_json)

        result = runner.invoke(
            main, ["fetch", "--json", "http://www.flickr.com/photos/bees/2341623661/"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == photo_payload

    def test_fetch_many_parallel_with_unsupported(self, runner, patch_transport, photo_json):
        transport = patch_transport(fetch_plugin, body=photo_json)

        result = runner.invoke(
            main,
            [
                "fetch",
                "--parallel",
                "http://www.flickr.com/photos/bees/1/",
                "https://unknown.example/1",
                "http://www.flickr.com/photos/bees/2/",
            ],
        )

        assert result.exit_code == 1
        assert "no provider supports this URL" in result.output
        assert len(transport.requested) == 2

    def test_fetch_retrieval_failure(self, runner, patch_transport):
        patch_transport(fetch_plugin, get_error=ConnectionError("refused"))

        result = runner.invoke(
            main, ["fetch", "--sequential", "https://youtu.be/5mMOsl8qpfc"]
        )

        assert result.exit_code == 1
        assert "refused" in result.output


class TestProvidersCommand:
    """Test cases for the providers command group."""

    def test_list(self, runner, catalog_file):
        result = runner.invoke(main, ["--catalog", str(catalog_file), "providers", "list"])

        assert result.exit_code == 0
        assert "First (2 endpoint(s), 2 scheme(s))" in result.output
        assert "2 of 2 providers" in result.output

    def test_list_search(self, runner):
        result = runner.invoke(main, ["providers", "list", "--search", "flick"])

        assert result.exit_code == 0
        assert "Flickr" in result.output
        assert "YouTube" not in result.output

    def test_update(self, runner, patch_transport, temp_dir, catalog_payload):
        transport = patch_transport(providers_plugin, body=json.dumps(catalog_payload))
        output = temp_dir / "out" / "providers.json"

        result = runner.invoke(
            main,
            ["providers", "update", "--url", "https://c.example/p.json", "-o", str(output)],
        )

        assert result.exit_code == 0
        assert transport.requested == ["https://c.example/p.json"]
        assert json.loads(output.read_text()) == catalog_payload

    def test_update_failure(self, runner, patch_transport, temp_dir):
        patch_transport(providers_plugin, body="not json")

        result = runner.invoke(
            main, ["providers", "update", "-o", str(temp_dir / "providers.json")]
        )

        assert result.exit_code != 0
        assert not (temp_dir / "providers.json").exists()


class TestInfoAndConfig:
    """Test cases for the info and config commands."""

    def test_info(self, runner, catalog_file):
        result = runner.invoke(main, ["--catalog", str(catalog_file), "info"])

        assert result.exit_code == 0
        assert "Providers: 2" in result.output
        assert "Endpoints: 3" in result.output

    def test_config_show(self, runner):
        result = runner.invoke(main, ["config", "show"])

        assert result.exit_code == 0
        assert "Providers URL: https://oembed.com/providers.json" in result.output
