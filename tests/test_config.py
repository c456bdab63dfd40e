"""Tests for environment-driven settings."""

import importlib
import os

import pytest

from iexcloud.config import DEFAULT_BASE_URL, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("IEX_TOKEN", "IEX_BASE_URL", "IEX_TIMEOUT", "IEX_MIN_INTERVAL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings().reload()
        assert s.TOKEN == ""
        assert s.BASE_URL == DEFAULT_BASE_URL == "https://cloud.iexapis.com/stable"
        assert s.TIMEOUT == 30
        assert s.MIN_INTERVAL == 0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("IEX_TOKEN", "pk_test")
        monkeypatch.setenv("IEX_BASE_URL", "https://sandbox.iexapis.com/stable")
        monkeypatch.setenv("IEX_TIMEOUT", "5")
        monkeypatch.setenv("IEX_MIN_INTERVAL", "0.2")
        s = Settings().reload()
        assert s.TOKEN == "pk_test"
        assert s.BASE_URL == "https://sandbox.iexapis.com/stable"
        assert s.TIMEOUT == 5.0
        assert s.MIN_INTERVAL == 0.2

    def test_numbers_read_lazily(self, monkeypatch):
        s = Settings()
        monkeypatch.setenv("IEX_TIMEOUT", "7.5")
        assert s.TIMEOUT == 7.5

    def test_blank_number_uses_default(self, monkeypatch):
        monkeypatch.setenv("IEX_MIN_INTERVAL", "")
        assert Settings().MIN_INTERVAL == 0


class TestMalformedNumbers:
    def test_import_survives(self, monkeypatch):
        monkeypatch.setenv("IEX_TIMEOUT", "abc")
        import iexcloud.config
        s = importlib.reload(iexcloud.config).Settings()
        assert s.TOKEN == os.getenv("IEX_TOKEN", "")

    def test_reload_names_variable(self, monkeypatch):
        monkeypatch.setenv("IEX_TIMEOUT", "abc")
        with pytest.raises(ValueError, match="IEX_TIMEOUT must be a number, got 'abc'"):
            Settings().reload()

    def test_access_names_variable(self, monkeypatch):
        monkeypatch.setenv("IEX_MIN_INTERVAL", "fast")
        with pytest.raises(ValueError, match="IEX_MIN_INTERVAL"):
            Settings().MIN_INTERVAL
