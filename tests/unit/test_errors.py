"""Tests for the core error hierarchy."""

from mcp.types import ErrorData

from interview_tool.core.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    RESOURCE_NOT_FOUND,
    ConfigError,
    InternalError,
    InterviewToolError,
    InvalidInputError,
    NotFoundError,
    UpstreamError,
)


class TestHierarchy:
    """All errors inherit from InterviewToolError."""

    def test_tool_errors_are_base_errors(self):
        for err in [
            NotFoundError("x"),
            InvalidInputError("x"),
            InternalError("x"),
            UpstreamError("x"),
            ConfigError("x"),
        ]:
            assert isinstance(err, InterviewToolError)

    def test_kinds_are_distinct(self):
        assert not isinstance(NotFoundError("x"), InvalidInputError)
        assert not isinstance(UpstreamError("x"), InternalError)


class TestCodes:
    def test_default_codes(self):
        assert NotFoundError("x").code == RESOURCE_NOT_FOUND
        assert InvalidInputError("x").code == INVALID_PARAMS
        assert InternalError("x").code == INTERNAL_ERROR
        assert UpstreamError("x").code == INTERNAL_ERROR

    def test_code_override(self):
        err = UpstreamError("network down", code=INVALID_REQUEST)
        assert err.code == INVALID_REQUEST
        assert UpstreamError("x").code == INTERNAL_ERROR  # class default untouched

    def test_message(self):
        err = NotFoundError("Nothing found for instance id abc")
        assert err.message == "Nothing found for instance id abc"
        assert str(err) == err.message


class TestErrorData:
    def test_to_error_data(self):
        data = InvalidInputError("bad cmd").to_error_data()
        assert isinstance(data, ErrorData)
        assert data.code == INVALID_PARAMS
        assert data.message == "bad cmd"
        assert data.data is None
