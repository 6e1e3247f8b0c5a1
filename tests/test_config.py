"""Tests for store configuration."""

import pytest

from rankpoll.config import DEFAULT_TIMEOUT, StoreConfig
from rankpoll.errors import ConfigurationError

ENV = {
    "SUPABASE_URL": "https://db.example.com/",
    "SUPABASE_ANON_KEY": "anon-key",
}


class TestStoreConfigFromEnv:
    def test_reads_values(self):
        config = StoreConfig.from_env(ENV)
        assert config.url == "https://db.example.com"
        assert config.anon_key == "anon-key"
        assert config.timeout == DEFAULT_TIMEOUT

    def test_timeout(self):
        config = StoreConfig.from_env({**ENV, "SUPABASE_TIMEOUT": "5"})
        assert config.timeout == 5.0

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError, match="SUPABASE_TIMEOUT"):
            StoreConfig.from_env({**ENV, "SUPABASE_TIMEOUT": "soon"})

    def test_missing_url(self):
        with pytest.raises(ConfigurationError, match="Missing SUPABASE_URL"):
            StoreConfig.from_env({"SUPABASE_ANON_KEY": "anon-key"})

    def test_missing_key(self):
        with pytest.raises(ConfigurationError, match="Missing SUPABASE_ANON_KEY"):
            StoreConfig.from_env({"SUPABASE_URL": "https://db.example.com", "SUPABASE_ANON_KEY": " "})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://env.example.com")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "k")
        monkeypatch.delenv("SUPABASE_TIMEOUT", raising=False)
        assert StoreConfig.from_env().url == "https://env.example.com"
