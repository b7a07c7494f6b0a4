"""Unit tests for parameter-filtering log processors and filters."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog

from logscrub.observability.logging import (
    JsonLoggerFactory,
    ParameterFilterProcessor,
    ParameterLogFilter,
    get_logger,
)
from logscrub.params import ParameterFilter, build_parameter_filter


def make_record(msg: Any, args: Any = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=args, exc_info=None,
    )


# ---------------------------------------------------------------------------
# ParameterFilterProcessor
# ---------------------------------------------------------------------------


class TestParameterFilterProcessor:
    def test_filters_event_keys(self) -> None:
        processor = ParameterFilterProcessor(ParameterFilter(["password"]))
        event = {"event": "login", "password": "p", "params": {"password": "q", "id": 1}}
        result = processor(None, "info", event)
        assert result == {
            "event": "login",
            "password": "[FILTERED]",
            "params": {"password": "[FILTERED]", "id": 1},
        }

    def test_skip_keys_untouched(self) -> None:
        processor = ParameterFilterProcessor(ParameterFilter(["event"]))
        result = processor(None, "info", {"event": "password reset", "level": "info"})
        assert result == {"event": "password reset", "level": "info"}

    def test_custom_skip_keys(self) -> None:
        processor = ParameterFilterProcessor(ParameterFilter(["secret"]), skip_keys=("secret",))
        assert processor(None, "info", {"secret": "s"}) == {"secret": "s"}

    def test_scrubs_graphql_query_in_event(self) -> None:
        processor = ParameterFilterProcessor(build_parameter_filter())
        result = processor(None, "info", {
            "event": "graphql.request",
            "query": '{ login(password: "hunter2") { token } }',
        })
        assert "hunter2" not in result["query"]
        assert "password: [FILTERED]" in result["query"]

    def test_exc_info_untouched(self) -> None:
        processor = ParameterFilterProcessor(ParameterFilter([lambda k, v: "changed"]))
        exc_info = (ValueError, ValueError("password"), None)
        result = processor(None, "error", {"event": "e", "exc_info": exc_info, "x": 1})
        assert result["exc_info"] is exc_info
        assert result["x"] == "changed"

    def test_keys_limit_filtered_fields(self) -> None:
        processor = ParameterFilterProcessor(build_parameter_filter(), keys=("params",))
        sql = "SELECT * FROM users WHERE password = %s"
        with structlog.testing.capture_logs() as logs:
            result = processor(None, "info", {
                "event": "db.query",
                "query": sql,
                "params": {"password": "p"},
            })
        assert result["query"] == sql
        assert result["params"] == {"password": "[FILTERED]"}
        assert logs == []

    def test_does_not_mutate_event_dict(self) -> None:
        processor = ParameterFilterProcessor(ParameterFilter(["password"]))
        event = {"event": "e", "password": "p"}
        processor(None, "info", event)
        assert event["password"] == "p"


# ---------------------------------------------------------------------------
# ParameterLogFilter
# ---------------------------------------------------------------------------


class TestParameterLogFilter:
    def test_filters_dict_msg(self) -> None:
        f = ParameterLogFilter(ParameterFilter(["password"]))
        record = make_record({"password": "p", "user": "u"})
        f.filter(record)
        assert record.msg == {"password": "[FILTERED]", "user": "u"}

    def test_filters_dict_args(self) -> None:
        f = ParameterLogFilter(ParameterFilter(["password"]))
        record = make_record("params=%(password)s", ({"password": "p"},))
        f.filter(record)
        assert record.getMessage() == "params=[FILTERED]"

    def test_filters_dicts_inside_tuple_args(self) -> None:
        f = ParameterLogFilter(ParameterFilter(["password"]))
        record = make_record("%s %s", ({"password": "p"}, "plain"))
        f.filter(record)
        assert record.args == ({"password": "[FILTERED]"}, "plain")

    def test_filter_returns_true(self) -> None:
        f = ParameterLogFilter(ParameterFilter(["password"]))
        assert f.filter(make_record("plain text")) is True

    def test_attached_to_stdlib_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("logscrub.tests.params")
        f = ParameterLogFilter(build_parameter_filter())
        logger.addFilter(f)
        try:
            with caplog.at_level(logging.INFO, logger="logscrub.tests.params"):
                logger.info("Parameters: %s", {"password": "hunter2", "page": 2})
        finally:
            logger.removeFilter(f)
        assert "hunter2" not in caplog.text
        assert "'password': '[FILTERED]'" in caplog.text


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_emits_filtered_json(self, restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(parameter_filter=build_parameter_filter())
        structlog.get_logger("logscrub.tests.json").info(
            "request.params", params={"password": "hunter2", "q": "shoes"}
        )
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "request.params"
        assert payload["params"] == {"password": "[FILTERED]", "q": "shoes"}
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_filters_bound_contextvars(
        self, restore_logging, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(parameter_filter=build_parameter_filter())
        structlog.contextvars.bind_contextvars(password="hunter2", request_id="r-1")
        structlog.get_logger("logscrub.tests.json").info("request.done")
        output = capsys.readouterr().err
        payload = json.loads(output.strip().splitlines()[-1])
        assert payload["password"] == "[FILTERED]"
        assert payload["request_id"] == "r-1"
        assert "hunter2" not in output

    def test_filter_keys_option(
        self, restore_logging, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(
            parameter_filter=build_parameter_filter(), filter_keys=("params",)
        )
        structlog.get_logger("logscrub.tests.json").info(
            "e", password="visible", params={"password": "hidden"}
        )
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["password"] == "visible"
        assert payload["params"] == {"password": "[FILTERED]"}

    def test_without_filter_values_pass_through(
        self, restore_logging, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure()
        structlog.get_logger("logscrub.tests.json").info("e", password="visible")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["password"] == "visible"

    def test_sets_root_level(self, restore_logging) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("x", service="api").info("hello")
        assert logs == [{"event": "hello", "log_level": "info", "service": "api"}]
