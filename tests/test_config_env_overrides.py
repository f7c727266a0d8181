"""Tests for environment variable overrides in config."""

from __future__ import annotations

import pytest


class TestTryParseEnvValue:
    """_try_parse_env_value correctly parses typed values."""

    def test_boolean_true_parsed(self):
        from ringgraph.config import _try_parse_env_value

        assert _try_parse_env_value("true") is True
        assert _try_parse_env_value("TRUE") is True

    def test_boolean_false_parsed(self):
        from ringgraph.config import _try_parse_env_value

        assert _try_parse_env_value("false") is False
        assert _try_parse_env_value("False") is False

    def test_integer_parsed(self):
        from ringgraph.config import _try_parse_env_value

        assert _try_parse_env_value("12") == 12
        assert _try_parse_env_value("-1") == -1

    def test_json_list_parsed(self):
        from ringgraph.config import _try_parse_env_value

        assert _try_parse_env_value("[1, 2]") == [1, 2]

    def test_malformed_json_returns_string(self):
        from ringgraph.config import _try_parse_env_value

        assert _try_parse_env_value("[not valid json") == "[not valid json"

    def test_plain_string_passthrough(self):
        from ringgraph.config import _try_parse_env_value

        assert _try_parse_env_value("hello") == "hello"


class TestApplyEnvOverrides:
    """_apply_env_overrides maps RINGGRAPH_<SECTION>_<KEY> to config."""

    def test_env_var_sets_size(self, monkeypatch):
        from ringgraph.config import _apply_env_overrides

        monkeypatch.setenv("RINGGRAPH_GRAPH_SIZE", "9")
        result = _apply_env_overrides({"graph": {"size": 5}})
        assert result["graph"]["size"] == 9

    def test_env_var_sets_boolean_with_underscored_key(self, monkeypatch):
        from ringgraph.config import _apply_env_overrides

        monkeypatch.setenv("RINGGRAPH_WEIGHTS_CHECK_EDGES", "false")
        result = _apply_env_overrides({"weights": {"check_edges": True}})
        assert result["weights"]["check_edges"] is False

    def test_env_var_creates_section(self, monkeypatch):
        from ringgraph.config import _apply_env_overrides

        monkeypatch.setenv("RINGGRAPH_SEARCH_SOURCE", "2")
        result = _apply_env_overrides({})
        assert result == {"search": {"source": 2}}

    def test_unrelated_env_vars_ignored(self, monkeypatch):
        from ringgraph.config import _apply_env_overrides

        monkeypatch.setenv("OTHER_GRAPH_SIZE", "9")
        monkeypatch.setenv("RINGGRAPH_NOKEY", "1")
        result = _apply_env_overrides({"graph": {"size": 5}})
        assert result == {"graph": {"size": 5}}

    def test_env_var_on_scalar_section(self, monkeypatch):
        from ringgraph.config import ConfigError, _apply_env_overrides

        monkeypatch.setenv("RINGGRAPH_GRAPH_SIZE", "9")
        with pytest.raises(ConfigError, match="graph is not a table"):
            _apply_env_overrides({"graph": 5})

    def test_public_variant_copies(self, monkeypatch):
        from ringgraph.config import apply_env_overrides

        monkeypatch.setenv("RINGGRAPH_GRAPH_SIZE", "7")
        original = {"graph": {"size": 5}}
        result = apply_env_overrides(original)
        assert result["graph"]["size"] == 7
        assert original["graph"]["size"] == 5

    def test_load_config_applies_env(self, tmp_path, monkeypatch):
        from ringgraph.config import load_config

        config_file = tmp_path / ".ringgraph.toml"
        config_file.write_text("[graph]\nsize = 4\n")
        monkeypatch.setenv("RINGGRAPH_GRAPH_SIZE", "6")

        assert load_config(config_file)["graph"]["size"] == 6
