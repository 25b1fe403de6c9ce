import logging

import pytest

from agent.settings import DEFAULT_DELAY_SECONDS, get_diagnosis_delay, get_log_level


def test_delay_defaults(monkeypatch):
    monkeypatch.delenv("DIAGNOSIS_DELAY_SECONDS", raising=False)
    assert get_diagnosis_delay() == DEFAULT_DELAY_SECONDS == 1.5


@pytest.mark.parametrize("raw, expected", [
    ("0", 0.0),
    ("0.25", 0.25),
    ("-3", 0.0),
    ("soon", DEFAULT_DELAY_SECONDS),
    ("  ", DEFAULT_DELAY_SECONDS),
])
def test_delay_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("DIAGNOSIS_DELAY_SECONDS", raw)
    assert get_diagnosis_delay() == expected


def test_log_level(monkeypatch):
    monkeypatch.setenv("APP_LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG
    monkeypatch.setenv("APP_LOG_LEVEL", "nonsense")
    assert get_log_level() == logging.INFO
