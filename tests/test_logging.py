"""Tests for logging setup."""

import logging

import pytest

from biztime.core.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging("WARNING")


def test_sets_root_level() -> None:
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty")
    assert logging.getLogger().level == logging.INFO


@pytest.mark.parametrize("sql_echo, expected", [(True, logging.INFO), (False, logging.WARNING)])
def test_sql_echo_drives_engine_logger(sql_echo, expected) -> None:
    configure_logging("INFO", sql_echo=sql_echo)
    assert logging.getLogger("sqlalchemy.engine").level == expected
