"""Error Hierarchy - verifies status codes, categories and the wire envelope."""

from object_service.core.errors import (
    ConfigurationError, ErrorCategory, ErrorSeverity, ObjectNotFoundError,
    ObjectServiceError, OperationFailedError, PayloadDecodeError, StoreError,
)


def test_to_response_is_single_error_key():
    err = OperationFailedError("update failed")
    assert err.to_response() == {"error": "update failed"}


def test_not_found_defaults():
    err = ObjectNotFoundError()
    assert err.http_status == 404
    assert err.message == "object not found"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.severity is ErrorSeverity.WARNING


def test_not_found_custom_message():
    err = ObjectNotFoundError("object for update not found")
    assert err.to_response() == {"error": "object for update not found"}


def test_payload_decode_error_defaults_to_500():
    assert PayloadDecodeError("bad").http_status == 500


def test_payload_decode_error_status_override():
    assert PayloadDecodeError("bad", http_status=400).http_status == 400


def test_store_error_keeps_detail_and_operation():
    err = StoreError("connection refused", "insert")
    assert err.detail == "connection refused"
    assert err.operation == "insert"
    assert err.message == "insert failed: connection refused"
    assert err.category is ErrorCategory.DATABASE


def test_configuration_error_is_critical():
    err = ConfigurationError("unable to parse configuration: x", path="config.json")
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.path == "config.json"


def test_all_errors_share_base():
    for err in (
        ObjectNotFoundError(), PayloadDecodeError("x"), OperationFailedError("x"),
        StoreError("x", "find"), ConfigurationError("x"),
    ):
        assert isinstance(err, ObjectServiceError)
        assert str(err) == err.message
