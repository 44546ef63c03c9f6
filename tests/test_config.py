"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sqlplusplus.core.config import ClientConfig, default_history_path


class TestClientConfig:

    def test_defaults(self):
        cfg = ClientConfig()
        assert cfg.connection_string is None
        assert cfg.max_history_size == 10000
        assert cfg.page_size == 20

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "connection_string: sqlite:///app.db\n"
            "username: scott\n"
            "max_history_size: 50\n"
            "page_size: 5\n"
        )
        cfg = ClientConfig.from_yaml(path)
        assert cfg.connection_string == "sqlite:///app.db"
        assert cfg.username == "scott"
        assert cfg.max_history_size == 50
        assert cfg.page_size == 5

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert ClientConfig.from_yaml(path) == ClientConfig()

    def test_env_var_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SQLPP_TEST_PASSWORD", "tiger")
        path = tmp_path / "config.yaml"
        path.write_text("password: ${SQLPP_TEST_PASSWORD}\n")
        assert ClientConfig.from_yaml(path).password == "tiger"

    def test_unset_env_var(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SQLPP_TEST_UNSET", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("password: ${SQLPP_TEST_UNSET}\n")
        with pytest.raises(ValueError, match="SQLPP_TEST_UNSET"):
            ClientConfig.from_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_sizes(self):
        with pytest.raises(ValidationError):
            ClientConfig(max_history_size=0)
        with pytest.raises(ValidationError):
            ClientConfig(page_size=0)

    def test_merged_skips_none(self):
        cfg = ClientConfig(connection_string="sqlite://", username="a")
        merged = cfg.merged(username=None, password="p", max_history_size=7)
        assert merged.username == "a"
        assert merged.password == "p"
        assert merged.max_history_size == 7
        assert cfg.password is None


class TestHistoryPath:

    def test_default_from_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_history_path() == tmp_path / ".sqlplusplus_history"
        assert ClientConfig().resolve_history_path() == tmp_path / ".sqlplusplus_history"

    def test_no_home(self, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert default_history_path() is None

    def test_explicit_file_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        cfg = ClientConfig(history_file="other/hist")
        assert cfg.resolve_history_path() == Path("other/hist")
