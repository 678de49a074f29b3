"""Shared fixtures for the test suite."""

import pytest

import core.config as core_config


@pytest.fixture
def i18n_settings(monkeypatch):
    """Override i18n settings for the duration of a test.

    Usage:
        def test_something(i18n_settings):
            i18n_settings(locale_override="fr-CA")
    """

    def _set(**overrides):
        for name, value in overrides.items():
            monkeypatch.setattr(core_config.settings.i18n, name, value)
        return core_config.settings.i18n

    return _set
