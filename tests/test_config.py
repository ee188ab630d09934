from __future__ import annotations

import logging

import pytest

from tarsym.common.config import TarSymSettings, parse_max_indirections
from tarsym.common.constants import DEFAULT_MAX_INDIRECTIONS, MAX_INDIRECTIONS_CAP, ExitCodes
from tarsym.common.errors import ConfigError
from tarsym.common import logging_config
from tarsym.common.logging_config import configure_logging


def test_max_indirections_default():
    assert TarSymSettings({}).max_indirections() == DEFAULT_MAX_INDIRECTIONS == 40


def test_max_indirections_env_precedence():
    assert TarSymSettings({"MAX_INDIRECTIONS": "7"}).max_indirections() == 7
    settings = TarSymSettings({"TARSYM_MAX_INDIRECTIONS": "12", "MAX_INDIRECTIONS": "7"})
    assert settings.max_indirections() == 12


@pytest.mark.parametrize("value", ["zero", "0", "-3", "1.5", "257", "1000"])
def test_max_indirections_invalid(value):
    with pytest.raises(ConfigError):
        TarSymSettings({"TARSYM_MAX_INDIRECTIONS": value}).max_indirections()


def test_parse_max_indirections_strips_whitespace():
    assert parse_max_indirections(" 9 ") == 9
    assert parse_max_indirections("256") == MAX_INDIRECTIONS_CAP


def test_log_level_resolution():
    assert TarSymSettings({}).log_level() == "WARNING"
    assert TarSymSettings({"DEBUG": "1"}).log_level() == "DEBUG"
    assert TarSymSettings({"TARSYM_LOG_LEVEL": "info", "DEBUG": "1"}).log_level() == "info"


def test_configure_logging_uses_environment(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    monkeypatch.setenv("TARSYM_LOG_LEVEL", "ERROR")
    configure_logging()
    configure_logging("debug")
    configure_logging("not-a-level")

    assert [call["level"] for call in calls] == [logging.ERROR, logging.DEBUG, logging.WARNING]


def test_exit_codes():
    assert ExitCodes.OK == 0
    assert ExitCodes.FAILURE == 1
