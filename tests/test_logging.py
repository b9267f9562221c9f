import json
import logging

from fastapi.testclient import TestClient

from main import app
from observability.logging import (
    CorrelationIDFilter,
    ServiceJsonFormatter,
    correlation_id_context,
    get_correlation_id,
)

client = TestClient(app)


def _record(msg="Facts resolved"):
    return logging.LogRecord("resolution.service", logging.INFO, __file__, 1, msg, None, None)


def test_correlation_id_is_scoped_to_the_block():
    assert get_correlation_id() is None

    with correlation_id_context("req-abc") as request_id:
        assert request_id == "req-abc"
        assert get_correlation_id() == "req-abc"

    assert get_correlation_id() is None


def test_generated_correlation_id_has_request_prefix():
    with correlation_id_context() as request_id:
        assert request_id.startswith("req-")


def test_filter_stamps_record_with_current_request():
    record = _record()

    with correlation_id_context("req-xyz"):
        CorrelationIDFilter().filter(record)

    assert record.correlation_id == "req-xyz"


def test_json_formatter_emits_service_fields():
    record = _record()
    CorrelationIDFilter().filter(record)
    formatter = ServiceJsonFormatter(
        "%(timestamp)s %(level)s %(logger)s %(correlation_id)s %(message)s",
        rename_fields={"timestamp": "@timestamp"},
    )

    data = json.loads(formatter.format(record))

    assert data["message"] == "Facts resolved"
    assert data["service"] == "streamtitle-backend"
    assert data["level"] == "INFO"
    assert data["correlation_id"] == "none"


def test_request_id_header_is_echoed():
    response = client.get("/health", headers={"X-Request-ID": "req-from-client"})

    assert response.headers["X-Request-ID"] == "req-from-client"
