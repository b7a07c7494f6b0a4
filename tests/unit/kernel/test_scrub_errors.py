"""Unit tests for the logscrub error hierarchy."""

from __future__ import annotations

from logscrub.config.validation import ConfigError, InvalidSettingValueError
from logscrub.kernel.errors import ApplicationError, BaseError, QueryParseError


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_str_has_code_and_message(self) -> None:
        assert str(BaseError("boom", code="custom")) == "[custom] boom"

    def test_log_fields_merge_detail(self) -> None:
        err = BaseError("m", code="custom", detail={"k": 1})
        assert err.to_log_fields() == {"code": "custom", "k": 1}

    def test_cause_reported_by_type_name_only(self) -> None:
        cause = ValueError("raw input here")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_log_fields()["cause"] == "ValueError"
        assert "raw input here" not in str(err)
        assert "raw input here" not in repr(err.to_log_fields())

    def test_repr(self) -> None:
        assert repr(ApplicationError("x")) == "ApplicationError(code='application_error', message='x')"


class TestQueryParseError:
    def test_defaults(self) -> None:
        err = QueryParseError()
        assert isinstance(err, ApplicationError)
        assert err.code == "query_parse_error"
        assert err.detail == {}

    def test_location_in_log_fields(self) -> None:
        err = QueryParseError(line=2, column=7)
        assert err.to_log_fields() == {"code": "query_parse_error", "line": 2, "column": 7}
        assert (err.line, err.column) == (2, 7)

    def test_extra_detail_merged(self) -> None:
        err = QueryParseError(line=1, detail={"param": "query"})
        assert err.detail == {"param": "query", "line": 1}


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert isinstance(InvalidSettingValueError("x", 1, "bad"), ConfigError)

    def test_codes(self) -> None:
        assert ConfigError("c").code == "config_error"
        assert InvalidSettingValueError("f", "", "r").code == "invalid_setting_value"

    def test_invalid_value_message_and_detail(self) -> None:
        err = InvalidSettingValueError("filtered_value", "***", "not a value")
        assert err.message == "Redaction setting 'filtered_value' rejected '***': not a value"
        assert err.detail == {"setting": "filtered_value", "reason": "not a value"}
