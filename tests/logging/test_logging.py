"""Tests for centralized logging behavior and configuration."""

import logging
import sys
from io import StringIO

import pytest

from astarpath import logging as ap_logging
from astarpath.algorithms.search import find_best_path
from astarpath.logging import (
    get_logger,
    level_for_flags,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def capture():
    """Install a StringIO handler as the package handler."""
    stream = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(stream))
    return stream


def test_default_handler_writes_to_stderr():
    setup_root_logger()
    handlers = logging.getLogger("astarpath").handlers
    assert len(handlers) == 1
    assert handlers[0] is ap_logging._handler
    assert handlers[0].stream is sys.stderr


def test_debug_filtered_until_level_lowered(capture):
    logger = get_logger("astarpath.test")

    logger.info("info-1")
    logger.debug("debug-1")
    assert "info-1" in capture.getvalue()
    assert "debug-1" not in capture.getvalue()

    set_global_log_level(logging.DEBUG)
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    set_global_log_level(logging.INFO)
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("astarpath.module1")
    logger2 = get_logger("astarpath.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("astarpath.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers(capture):
    root_logger = logging.getLogger("astarpath")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR
    assert ap_logging._handler.level == logging.ERROR


def test_reset_removes_only_package_handler():
    other = logging.NullHandler()
    root_logger = logging.getLogger("astarpath")
    setup_root_logger()
    root_logger.addHandler(other)
    try:
        reset_logging()
        assert root_logger.handlers == [other]
        assert root_logger.level == logging.NOTSET
    finally:
        root_logger.removeHandler(other)


def test_custom_format_string_applied():
    stream = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(
        level=logging.INFO, format_string=fmt, handler=logging.StreamHandler(stream)
    )

    get_logger("astarpath.test.format").info("hello")
    out = stream.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:astarpath.test.format" in out
    assert "MSG:hello" in out


@pytest.mark.parametrize(
    "verbose,quiet,expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_for_flags(verbose, quiet, expected):
    assert level_for_flags(verbose=verbose, quiet=quiet) == expected


def test_search_logs_only_at_debug(capture):
    """The search is silent at INFO and reports its outcome at DEBUG."""
    graph = {"a": ([("b", 1.0)], 0.0), "b": ([], 0.0)}
    find_best_path("a", graph, "b")
    assert capture.getvalue() == ""

    set_global_log_level(logging.DEBUG)
    find_best_path("a", graph, "b")
    out = capture.getvalue()
    assert "Searching 'a' -> 'b' over 2 nodes" in out
    assert "Found path 'a' -> 'b' with 2 nodes" in out
    assert "(2 nodes scored)" in out
