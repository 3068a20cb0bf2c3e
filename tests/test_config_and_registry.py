import io
import logging
from datetime import date

import pytest

from spending_analytics.categories import get_category_registry
from spending_analytics.config import DARK_THEME, LIGHT_THEME, Settings
from spending_analytics.labels import get_label_resolver
from spending_analytics.logging_setup import configure_logging, get_logger


def test_settings_defaults_and_env(monkeypatch: pytest.MonkeyPatch):
    assert Settings.from_env() == Settings(theme="light", language="eng")
    monkeypatch.setenv("SPENDING_ANALYTICS_THEME", " Dark ")
    monkeypatch.setenv("SPENDING_ANALYTICS_LANGUAGE", "vie")
    settings = Settings.from_env()
    assert settings.is_dark
    assert settings.colors is DARK_THEME
    assert settings.language == "vie"


def test_settings_reject_bad_values(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SPENDING_ANALYTICS_LANGUAGE", "fr")
    with pytest.raises(ValueError, match="SPENDING_ANALYTICS_LANGUAGE"):
        Settings.from_env()
    with pytest.raises(ValueError):
        Settings(theme="sepia")  # type: ignore[arg-type]


def test_light_theme_is_default():
    assert Settings().colors is LIGHT_THEME


def test_label_resolver_weekdays_months_and_unknown_keys():
    eng = get_label_resolver("eng")
    vie = get_label_resolver("vie")
    assert eng.weekday(date(2024, 1, 7)) == "Sun"
    assert vie.weekday(date(2024, 1, 7)) == "CN"
    assert eng.month(0) == "J"
    assert vie.month(11) == "T12"
    assert eng.others == "Others"
    assert eng.translate("summary.chart.unknown") == "summary.chart.unknown"
    with pytest.raises(ValueError):
        get_label_resolver("fr")  # type: ignore[arg-type]


def test_registry_lookup_and_fallbacks():
    registry = get_category_registry()
    assert registry.lookup(" Food ", "spent").label == "Food"
    assert registry.lookup("crypto", "spent").value == "other"
    assert registry.fallback("income").value == "other_income"
    assert registry.find("crypto", "income") is None
    assert get_category_registry("vie").lookup("food", "spent").label == "Ăn uống"
    with pytest.raises(ValueError):
        registry.entries("net")  # type: ignore[arg-type]


def test_configure_logging_attaches_single_handler(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SPENDING_ANALYTICS_LOG_LEVEL", "debug")
    stream = io.StringIO()
    configure_logging(stream=stream)
    configure_logging(stream=io.StringIO())  # second call is a no-op

    pkg = logging.getLogger("spending_analytics")
    assert pkg.level == logging.DEBUG
    assert len(pkg.handlers) == 1

    get_logger("spending_analytics.test").debug("hello %s", "there")
    assert "hello there" in stream.getvalue()
