"""Error Hierarchy — tests for codes, statuses and the REST envelope."""

from patoapp.core.errors import (
    AuthenticationRequiredError, AuthStoreNotInitializedError, DuplicateAccountError,
    ErrorCategory, FormValidationError, InvalidCredentialsError, PatoAppError,
    PermissionDeniedError, ResourceNotFoundError, StorageError,
)


def test_all_errors_share_the_base_class():
    for err in (
        AuthenticationRequiredError(), AuthStoreNotInitializedError(),
        DuplicateAccountError(), FormValidationError({"x": "y"}),
        InvalidCredentialsError(), PermissionDeniedError("no"),
        ResourceNotFoundError("Pato", "1"), StorageError("boom", "set"),
    ):
        assert isinstance(err, PatoAppError)


def test_http_statuses():
    assert AuthenticationRequiredError().http_status == 401
    assert InvalidCredentialsError().http_status == 401
    assert PermissionDeniedError("no").http_status == 403
    assert ResourceNotFoundError("Pato", "9").http_status == 404
    assert DuplicateAccountError().http_status == 409
    assert FormValidationError({"email": "bad"}).http_status == 400
    assert StorageError("boom", "set").http_status == 503


def test_misuse_error_is_distinct():
    err = AuthStoreNotInitializedError()
    assert err.category == ErrorCategory.MISUSE
    assert err.code == "AUTH_STORE_NOT_INITIALIZED"
    assert "outside provider" in err.message


def test_response_envelope_shape():
    body = ResourceNotFoundError("Pato", "42").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Pato '42' not found"
    assert error["category"] == "resource_not_found"
    assert "timestamp" in error
    assert "fields" not in error


def test_form_validation_error_carries_field_map():
    err = FormValidationError({"email": "El email es requerido"})
    assert err.fields == {"email": "El email es requerido"}
    assert err.to_response()["error"]["fields"] == {"email": "El email es requerido"}
