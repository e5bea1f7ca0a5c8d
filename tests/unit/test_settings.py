import logging

import pytest

from git_guide.config import LOG_LEVEL_ENV_VAR
from git_guide.settings import (
    PACKAGE_LOGGER_NAME,
    _ClickEchoHandler,
    git_guide_logger,
    set_git_guide_log_level,
)


@pytest.fixture(autouse=True)
def restore_package_level():
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


def test_package_logger_gets_single_handler():
    git_guide_logger("git_guide.tests.single")
    git_guide_logger("git_guide.tests.single")

    handlers = logging.getLogger(PACKAGE_LOGGER_NAME).handlers

    assert sum(isinstance(handler, _ClickEchoHandler) for handler in handlers) == 1


def test_module_loggers_carry_no_handlers_of_their_own():
    assert git_guide_logger("git_guide.tests.bare").handlers == []


def test_level_read_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")

    logger = git_guide_logger("git_guide.tests.env")

    assert logger.getEffectiveLevel() == logging.ERROR


def test_set_level_applies_to_module_loggers():
    logger = git_guide_logger("git_guide.tests.update")

    set_git_guide_log_level("debug")

    assert logger.getEffectiveLevel() == logging.DEBUG


def test_unknown_level_name_resets_to_notset():
    set_git_guide_log_level("chatty")

    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.NOTSET


def test_handler_prefixes_level_and_logger_name(capsys):
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s::%(name)s] %(message)s"))
    record = logging.LogRecord(
        "git_guide.demo", logging.WARNING, __file__, 1, "careful", None, None
    )

    handler.emit(record)

    assert "[WARNING::git_guide.demo] careful" in capsys.readouterr().err
