"""Tests for application settings."""

import pytest

from bizinsight.config import (
    AppSettings,
    Environment,
    get_app_settings,
    get_client_base_url,
    set_app_settings,
)


@pytest.fixture(autouse=True)
def reset_settings():
    set_app_settings(None)
    yield
    set_app_settings(None)


def test_settings_are_loaded_from_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("CLIENT_BASE_URL", "https://app.example.com")

    settings = get_app_settings()

    assert settings.environment == Environment.STAGING
    assert get_client_base_url() == "https://app.example.com"


def test_set_app_settings_overrides_environment(monkeypatch):
    monkeypatch.setenv("CLIENT_BASE_URL", "https://ignored.example.com")

    set_app_settings(AppSettings(client_base_url="http://localhost:5173"))

    assert get_client_base_url() == "http://localhost:5173"
    assert get_app_settings().environment == Environment.DEVELOPMENT
