from __future__ import annotations

import pytest
from pydantic import ValidationError

from asb_dividend.config import Settings


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ASB_DEFAULT_LANGUAGE", "en")
    monkeypatch.setenv("ASB_LOG_LEVEL", "debug")
    monkeypatch.setenv("ASB_MAX_INVESTMENT_PERIOD_YEARS", "40")

    settings = Settings()

    assert settings.DEFAULT_LANGUAGE == "en"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.MAX_INVESTMENT_PERIOD_YEARS == 40


def test_unsupported_default_language_is_rejected():
    with pytest.raises(ValidationError):
        Settings(DEFAULT_LANGUAGE="fr")
