"""Structured Logging — entity tags in both formats, idempotent setup."""

import json
import logging

import pytest

from jobly.infrastructure import observability
from jobly.infrastructure.observability import (
    EntityTextFormatter,
    JSONFormatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "jobly.services.company_repository", logging.INFO, __file__, 1,
        "Company created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_surfaces_entity_and_identifier():
    out = json.loads(JSONFormatter().format(
        _record(entity="Company", identifier="c1", error_code=None),
    ))
    assert out["message"] == "Company created"
    assert out["entity"] == "Company"
    assert out["identifier"] == "c1"
    assert "error_code" not in out


def test_text_appends_entity_tag():
    line = EntityTextFormatter().format(_record(entity="Job", identifier=7))
    assert line.endswith("Company created [Job/7]")


def test_text_entity_without_identifier():
    line = EntityTextFormatter().format(_record(entity="Company"))
    assert line.endswith("[Company]")


def test_text_without_entity_has_no_tag():
    line = EntityTextFormatter().format(_record())
    assert line.endswith("Company created")


@pytest.fixture
def restore_root_logging():
    handlers, level = list(logging.root.handlers), logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)
    observability._handler = None


def test_setup_logging_does_not_stack_handlers(restore_root_logging):
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("WARNING", "json")
    assert len(logging.root.handlers) == before + 1
    assert isinstance(logging.root.handlers[-1].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
