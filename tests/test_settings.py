"""Tests for Settings from environment."""

import os

import pytest
from pydantic import ValidationError

from credentials.google_token.verifier import GOOGLE_USERINFO_URL
from credentials.settings import Settings


@pytest.fixture
def credentials_env(monkeypatch):
    """Start from an environment with no CREDENTIALS_* overrides."""
    for key in list(os.environ):
        if key.startswith("CREDENTIALS_"):
            monkeypatch.delenv(key)
    return monkeypatch


def test_settings_defaults(credentials_env):
    s = Settings()
    assert s.log_level == "INFO"
    assert s.google_token_ttl_seconds is None
    assert s.google_userinfo_url == GOOGLE_USERINFO_URL
    assert s.google_cache_max_entries == 1024


def test_settings_from_environ(credentials_env):
    credentials_env.setenv("CREDENTIALS_LOG_LEVEL", "DEBUG")
    credentials_env.setenv("CREDENTIALS_GOOGLE_TOKEN_TTL_SECONDS", "300")
    credentials_env.setenv("CREDENTIALS_GOOGLE_CACHE_MAX_ENTRIES", "50")
    s = Settings()
    assert s.log_level == "DEBUG"
    assert s.google_token_ttl_seconds == 300.0
    assert s.google_cache_max_entries == 50


@pytest.mark.parametrize(
    "key, value",
    [
        ("CREDENTIALS_GOOGLE_TOKEN_TTL_SECONDS", "-1"),
        ("CREDENTIALS_GOOGLE_CACHE_MAX_ENTRIES", "0"),
    ],
)
def test_settings_rejects_out_of_range(credentials_env, key, value):
    credentials_env.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings()
