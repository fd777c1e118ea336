import json
import logging

from app.core.logging import CustomJsonFormatter, request_id_var, setup_logging


def make_record(message="Import finished", level=logging.WARNING):
    return logging.LogRecord("app.services.survey_importer", level, __file__, 1, message, None, None)


def test_formatter_adds_request_id_timestamp_and_level():
    formatter = CustomJsonFormatter("%(timestamp) %(level) %(name) %(message)")
    token = request_id_var.set("req-123")
    try:
        payload = json.loads(formatter.format(make_record()))
    finally:
        request_id_var.reset(token)

    assert payload["request_id"] == "req-123"
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Import finished"
    assert payload["name"] == "app.services.survey_importer"
    assert "+00:00" in payload["timestamp"]


def test_formatter_omits_request_id_outside_requests():
    formatter = CustomJsonFormatter("%(timestamp) %(level) %(name) %(message)")
    payload = json.loads(formatter.format(make_record(level=logging.INFO)))
    assert "request_id" not in payload
    assert payload["level"] == "INFO"


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging()
    handlers = list(root.handlers)
    setup_logging()
    assert root.handlers == handlers
    assert sum(isinstance(h.formatter, CustomJsonFormatter) for h in root.handlers) == 1
