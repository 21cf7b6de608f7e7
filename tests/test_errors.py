from __future__ import annotations

from stripe_api.core.errors import (
    DecodeError,
    FieldTypeMismatch,
    MalformedPayload,
    RemoteError,
    StripeAPIError,
    TransportFailure,
    UnexpectedShape,
)


def test_taxonomy():
    for error_type in (MalformedPayload, UnexpectedShape, FieldTypeMismatch):
        assert issubclass(error_type, DecodeError)
    for error_type in (DecodeError, RemoteError, TransportFailure):
        assert issubclass(error_type, StripeAPIError)
    assert not issubclass(RemoteError, DecodeError)


def test_remote_error_parses_stripe_envelope():
    body = b'{"error": {"type": "invalid_request_error", "message": "No such customer: cus_x", "param": "id"}}'
    error = RemoteError(method="GET", path="/customers/cus_x", status=404, body=body)

    assert error.error_type == "invalid_request_error"
    assert error.param == "id"
    assert error.code is None
    assert "HTTP 404" in str(error)
    assert "No such customer" in str(error)


def test_remote_error_tolerates_unexpected_bodies():
    for body in (b"", b"not json", b"[]", b'{"error": "oops"}', b"\xff\xfe"):
        error = RemoteError(method="POST", path="/charges", status=500, body=body)
        assert error.error == {}
        assert error.message is None


def test_field_type_mismatch_keeps_field_and_raw():
    error = FieldTypeMismatch("data.0.amount", raw=b"{}")

    assert error.field == "data.0.amount"
    assert error.raw == b"{}"
    assert "data.0.amount" in str(error)
