"""
Tests for the error domain layer.

Tests coercion, classification and rendering in isolation.
No framework or IO required; the logging sink is a mock.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from starlette.exceptions import HTTPException

from errorkit.domain.errors.classifier import (
    CLIENT_LOG_FORMAT,
    SERVER_LOG_FORMAT,
    ErrorClassifier,
    classify,
)
from errorkit.domain.errors.coercer import coerce_error
from errorkit.domain.errors.entities import (
    DEFAULT_MESSAGE,
    CanonicalError,
    ExecutionError,
    SeverityCategory,
    define_error,
)
from errorkit.domain.errors.exceptions import UnclassifiableStatusError
from errorkit.domain.errors.renderer import PayloadRenderer


class TestExecutionError:
    """Tests for the ExecutionError constructor."""

    def test_message_and_status(self) -> None:
        err = ExecutionError("Some error", 404)
        assert err.message == "Some error"
        assert err.status == 404
        assert err.name == "ExecutionError"

    def test_status_only(self) -> None:
        err = ExecutionError(401)
        assert err.status == 401
        assert err.message == DEFAULT_MESSAGE

    def test_no_arguments(self) -> None:
        err = ExecutionError()
        assert err.status == 500
        assert err.message == DEFAULT_MESSAGE

    def test_wraps_named_exception(self) -> None:
        err = ExecutionError(KeyError("id"))
        assert err.name == "KeyError"
        assert err.status == 500

    def test_wraps_generic_exception(self) -> None:
        """A plain Exception carries no meaningful name."""
        err = ExecutionError(Exception("boom"))
        assert err.name == "ExecutionError"
        assert err.message == "boom"

    def test_str_includes_name(self) -> None:
        assert str(ExecutionError("Some error")) == "ExecutionError: Some error"

    def test_define_error_sets_name(self) -> None:
        SomeError = define_error("SomeError")
        err = SomeError("Some error", 404)
        assert isinstance(err, ExecutionError)
        assert err.name == "SomeError"
        assert err.status == 404


    def test_wraps_import_error_uses_class_name(self) -> None:
        """`name` on ImportError is the missing module, not an error name."""
        err = ExecutionError(ModuleNotFoundError("No module named numpy", name="numpy"))
        assert err.name == "ModuleNotFoundError"

    def test_wraps_custom_error_keeps_its_name(self) -> None:
        SomeError = define_error("SomeError")
        err = ExecutionError(SomeError("Some error", 404))
        assert err.name == "SomeError"
        assert err.status == 404

    def test_wraps_camel_case_status_code(self) -> None:
        exc = RuntimeError("conflict")
        exc.statusCode = 409
        assert ExecutionError(exc).status == 409
        assert coerce_error(ExecutionError(exc)).status == coerce_error(exc).status


class TestCoercer:
    """Tests for coerce_error."""

    def test_plain_exception_defaults_to_500(self) -> None:
        error = coerce_error(Exception("boom"))
        assert error.message == "boom"
        assert error.status == 500
        assert error.name == "ExecutionError"

    def test_exception_status_attribute_is_kept(self) -> None:
        exc = ValueError("Some error")
        exc.status = 404
        error = coerce_error(exc)
        assert error.status == 404
        assert error.name == "ValueError"

    def test_exception_status_code_attribute(self) -> None:
        exc = RuntimeError("teapot")
        exc.status_code = 418
        assert coerce_error(exc).status == 418

    def test_http_exception_uses_detail(self) -> None:
        error = coerce_error(HTTPException(status_code=404))
        assert error.status == 404
        assert error.message == "Not Found"

    @pytest.mark.parametrize("text", ["oops", "Not an error object", " "])
    def test_string_becomes_message(self, text: str) -> None:
        error = coerce_error(text)
        assert error.message == text
        assert error.status == 500

    def test_mapping_fields_are_extracted(self) -> None:
        error = coerce_error({"message": "gone", "status": 410})
        assert error.message == "gone"
        assert error.status == 410

    def test_object_with_status_code_camel_case(self) -> None:
        error = coerce_error(SimpleNamespace(message="forbidden", statusCode=403))
        assert error.message == "forbidden"
        assert error.status == 403

    @pytest.mark.parametrize("status", [0, -404, "abc", None, True, 4.04])
    def test_invalid_status_falls_back_to_500(self, status: object) -> None:
        assert coerce_error({"message": "m", "status": status}).status == 500

    def test_numeric_string_status_is_accepted(self) -> None:
        assert coerce_error({"status": "404"}).status == 404

    @pytest.mark.parametrize("value", [None, 42, object(), []])
    def test_unrecognized_values_use_placeholder(self, value: object) -> None:
        error = coerce_error(value)
        assert error.message == DEFAULT_MESSAGE
        assert error.status == 500

    def test_canonical_error_passes_through(self) -> None:
        error = CanonicalError(message="m", status=404)
        assert coerce_error(error) is error

    def test_name_override(self) -> None:
        error = coerce_error(Exception("boom"), error_name="ApiError")
        assert error.name == "ApiError"

    def test_attribute_error_keeps_class_name(self) -> None:
        try:
            object().missing_attr
        except AttributeError as exc:
            error = coerce_error(exc)
        assert error.name == "AttributeError"
        assert error.detail.startswith("AttributeError: ")

    def test_name_error_keeps_class_name(self) -> None:
        try:
            undefined_variable  # noqa: F821
        except NameError as exc:
            error = coerce_error(exc)
        assert error.name == "NameError"
        assert "undefined_variable" in error.message

    @pytest.mark.parametrize("name", ["Error", "Exception", "", None, 7])
    def test_generic_names_fall_back_for_mappings(self, name: object) -> None:
        assert coerce_error({"message": "m", "name": name}).name == "ExecutionError"

    def test_generic_names_fall_back_for_objects(self) -> None:
        error = coerce_error(SimpleNamespace(message="m", name="Error"))
        assert error.name == "ExecutionError"

    def test_specific_mapping_name_is_kept(self) -> None:
        assert coerce_error({"message": "m", "name": "QuotaError"}).name == "QuotaError"

    def test_coercion_is_idempotent(self) -> None:
        once = coerce_error(ExecutionError("Some error", 401), error_name="ApiError")
        twice = coerce_error(once, error_name="ApiError")
        assert (twice.name, twice.message, twice.status) == (
            once.name,
            once.message,
            once.status,
        )

    def test_input_is_not_mutated(self) -> None:
        exc = ValueError("Some error")
        coerce_error(exc, error_name="ApiError")
        assert not hasattr(exc, "name")
        assert not hasattr(exc, "status")

    def test_detail_contains_traceback_when_raised(self) -> None:
        try:
            raise ValueError("raised")
        except ValueError as exc:
            error = coerce_error(exc)
        assert error.detail.startswith("ValueError: raised")
        assert "test_detail_contains_traceback_when_raised" in error.detail


class TestClassifier:
    """Tests for status classification and handler election."""

    @pytest.mark.parametrize("status", [400, 401, 404, 418, 499, "404"])
    def test_client_statuses(self, status: object) -> None:
        assert classify(status) is SeverityCategory.CLIENT

    @pytest.mark.parametrize("status", [500, 502, 503, 599])
    def test_server_statuses(self, status: int) -> None:
        assert classify(status) is SeverityCategory.SERVER

    @pytest.mark.parametrize(
        "status", [0, 200, 302, 999, 4000, -404, "abc", None, True]
    )
    def test_unclassifiable_statuses(self, status: object) -> None:
        assert classify(status) is SeverityCategory.UNCLASSIFIABLE

    def test_client_handler_logs_client_error(self) -> None:
        sink = MagicMock()
        error = CanonicalError(message="Some error", status=404)
        category, handler = ErrorClassifier(sink).elect(error)

        handler(error)

        assert category is SeverityCategory.CLIENT
        sink.error.assert_called_once_with(
            CLIENT_LOG_FORMAT, "ExecutionError: Some error"
        )

    def test_server_handler_logs_server_error(self) -> None:
        sink = MagicMock()
        error = CanonicalError(message="boom", status=503)
        category, handler = ErrorClassifier(sink).elect(error)

        handler(error)

        assert category is SeverityCategory.SERVER
        sink.error.assert_called_once_with(SERVER_LOG_FORMAT, "ExecutionError: boom")

    def test_election_does_not_log(self) -> None:
        sink = MagicMock()
        ErrorClassifier(sink).elect(CanonicalError(status=400))
        sink.error.assert_not_called()

    def test_unclassifiable_raises(self) -> None:
        sink = MagicMock()
        error = CanonicalError(message="fine", status=200)

        with pytest.raises(UnclassifiableStatusError) as exc_info:
            ErrorClassifier(sink).elect(error)

        assert exc_info.value.error is error
        assert "neither 4xx nor 5xx" in exc_info.value.message
        sink.error.assert_not_called()


class TestPayloadRenderer:
    """Tests for PayloadRenderer."""

    def test_error_key_absent_when_not_exposed(self) -> None:
        error = CanonicalError(message="m", status=400, detail="stack")
        body = PayloadRenderer(expose_internals=False).render(error).as_dict()
        assert body == {"success": False, "message": "m"}

    def test_error_key_present_when_exposed(self) -> None:
        error = CanonicalError(message="m", status=400, detail="stack")
        body = PayloadRenderer(expose_internals=True).render(error).as_dict()
        assert body == {"success": False, "message": "m", "error": "stack"}

    def test_message_override(self) -> None:
        error = CanonicalError(message="m")
        payload = PayloadRenderer(expose_internals=False).render(error, message="x")
        assert payload.message == "x"
        assert payload.success is False
