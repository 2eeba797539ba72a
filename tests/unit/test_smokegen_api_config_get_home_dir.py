"""Unit tests for smokegen.api.config.get_home_dir module."""

from pathlib import Path

import pytest

from smokegen.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


class TestGetHomeDir:
    """Test get_home_dir function."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("SMOKEGEN_HOME", raising=False)
        monkeypatch.delenv("HOME", raising=False)

        home_dir = get_home_dir()

        assert isinstance(home_dir, Path)
        assert home_dir.name == ".smokegen"

    def test_smokegen_home_env(self, monkeypatch, tmp_path):
        custom_home = tmp_path / "custom"
        monkeypatch.setenv("SMOKEGEN_HOME", str(custom_home))

        assert get_home_dir() == custom_home.resolve()

    def test_home_env(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SMOKEGEN_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_home_dir() == tmp_path / ".smokegen"

    def test_precedence(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SMOKEGEN_HOME", str(tmp_path / "a"))
        monkeypatch.setenv("HOME", str(tmp_path / "b"))

        assert get_home_dir() == (tmp_path / "a").resolve()

    def test_parts(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SMOKEGEN_HOME", str(tmp_path))

        assert get_home_dir("config.json") == tmp_path.resolve() / "config.json"
