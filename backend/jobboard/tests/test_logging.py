"""Tests for structured logging."""

import json
import logging
import sys
from io import StringIO

import pytest

from jobboard.core.logging import (
    ConsoleFormatter,
    JSONFormatter,
    LoggerAdapter,
    get_logger,
    request_id_var,
)


def _record(msg="Listing served", level=logging.INFO, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="jobboard.services.search_service",
        level=level,
        pathname="/srv/jobboard/services/search_service.py",
        lineno=37,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def request_id():
    token = request_id_var.set("req-42")
    yield "req-42"
    request_id_var.reset(token)


@pytest.fixture
def captured():
    """Logger writing JSON lines into a buffer."""
    logger = logging.getLogger("test.jobboard.capture")
    logger.setLevel(logging.DEBUG)
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    yield logger, stream
    logger.removeHandler(handler)


class TestJSONFormatter:
    def test_core_fields(self):
        parsed = json.loads(JSONFormatter(service="jobboard-test").format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "jobboard.services.search_service"
        assert parsed["message"] == "Listing served"
        assert parsed["service"] == "jobboard-test"
        assert parsed["line"] == 37
        assert "timestamp" in parsed
        assert "request_id" not in parsed

    def test_request_id_from_context(self, request_id):
        parsed = json.loads(JSONFormatter().format(_record()))
        assert parsed["request_id"] == request_id

    def test_extra_fields(self):
        record = _record(total=12, sort_by="salary", facets=["remoteType"])
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["extra"] == {"total": 12, "sort_by": "salary", "facets": ["remoteType"]}

    def test_extra_can_be_disabled(self):
        parsed = json.loads(JSONFormatter(include_extra=False).format(_record(total=1)))
        assert "extra" not in parsed

    def test_exception_details(self):
        try:
            raise RuntimeError("database went away")
        except RuntimeError:
            exc_info = sys.exc_info()
        parsed = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))
        assert parsed["exception"]["type"] == "RuntimeError"
        assert parsed["exception"]["message"] == "database went away"
        assert isinstance(parsed["exception"]["traceback"], list)

    def test_non_serializable_extra_is_stringified(self):
        parsed = json.loads(JSONFormatter().format(_record(payload=object())))
        assert "object" in parsed["extra"]["payload"]


class TestConsoleFormatter:
    def test_readable_line_with_extras(self):
        output = ConsoleFormatter().format(_record(total=3, page=2))
        assert "INFO" in output
        assert "jobboard.services.search_service" in output
        assert "Listing served" in output
        assert output.endswith("page=2 total=3")

    def test_request_id_prefix(self, request_id):
        assert f"[{request_id}] Listing served" in ConsoleFormatter().format(_record())

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_level_colors(self, level):
        output = ConsoleFormatter().format(_record(level=getattr(logging, level)))
        assert ConsoleFormatter.COLORS[level] in output


class TestLoggerAdapter:
    def test_context_is_merged_with_call_extra(self, captured):
        logger, stream = captured
        adapter = LoggerAdapter(logger, {"saved_search_id": 7, "user_id": 3})
        adapter.info("Saved search alert ready", extra={"job_ids": [1, 2]})

        parsed = json.loads(stream.getvalue())
        assert parsed["extra"] == {"saved_search_id": 7, "user_id": 3, "job_ids": [1, 2]}


class TestRequestLogging:
    def test_get_logger(self):
        assert get_logger("jobboard.test").name == "jobboard.test"

    def test_response_carries_request_id(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 32

    def test_incoming_request_id_is_kept(self, client):
        response = client.get("/health", headers={"X-Request-ID": "trace-abc"})
        assert response.headers["X-Request-ID"] == "trace-abc"

    def test_request_line_is_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="jobboard.main"):
            client.get("/health/live")
        records = [r for r in caplog.records if getattr(r, "path", None) == "/health/live"]
        assert records and records[0].status_code == 200
