"""Tests for the logging setup."""

import logging

import pytest
import structlog

from eventhub.core.logging import build_processors, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_is_idempotent(restore_logging):
    setup_logging()
    setup_logging()

    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_records_carry_service_and_environment():
    event_dict = {"event": "event_created"}
    for processor in build_processors("Tickets", "staging"):
        event_dict = processor(logging.getLogger("eventhub"), "info", event_dict)

    assert event_dict["service"] == "Tickets"
    assert event_dict["env"] == "staging"
    assert event_dict["timestamp"].endswith("Z")
