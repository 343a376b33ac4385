"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    SportFwdError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    ConflictError,
)


class TestSportFwdError:
    def test_sportfwd_error_message(self):
        """SportFwdError should store message."""
        error = SportFwdError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_sportfwd_error_default_code(self):
        """SportFwdError should default code to class name."""
        error = SportFwdError("Test error")
        assert error.code == "SportFwdError"

    def test_sportfwd_error_custom_code(self):
        """SportFwdError should accept custom code."""
        error = SportFwdError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_sportfwd_error_default_details(self):
        """SportFwdError should default details to empty dict."""
        error = SportFwdError("Test error")
        assert error.details == {}

    def test_sportfwd_error_custom_details(self):
        """SportFwdError should accept custom details."""
        error = SportFwdError("Test error", details={"key": "value"})
        assert error.details == {"key": "value"}

    def test_sportfwd_error_to_dict(self):
        """SportFwdError should convert to dict."""
        error = SportFwdError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_sportfwd_error_to_dict_minimal(self):
        """SportFwdError.to_dict should work with minimal args."""
        error = SportFwdError("Test error")
        result = error.to_dict()

        assert result["error"] == "SportFwdError"
        assert result["message"] == "Test error"
        assert result["details"] == {}


class TestNotFoundError:
    def test_not_found_error_inherits_sportfwd_error(self):
        """NotFoundError should inherit from SportFwdError."""
        error = NotFoundError("Resource not found")
        assert isinstance(error, SportFwdError)

    def test_not_found_error_default_code(self):
        """NotFoundError should default code to class name."""
        error = NotFoundError("Resource not found")
        assert error.code == "NotFoundError"


class TestValidationError:
    def test_validation_error_inherits_sportfwd_error(self):
        """ValidationError should inherit from SportFwdError."""
        error = ValidationError("Invalid input")
        assert isinstance(error, SportFwdError)

    def test_validation_error_with_details(self):
        """ValidationError should support field-level details."""
        error = ValidationError(
            "Validation failed",
            details={"fields": {"email": "Invalid format"}}
        )
        assert error.details["fields"]["email"] == "Invalid format"


class TestAuthenticationError:
    def test_authentication_error_inherits_sportfwd_error(self):
        """AuthenticationError should inherit from SportFwdError."""
        error = AuthenticationError("Invalid token")
        assert isinstance(error, SportFwdError)


class TestAuthorizationError:
    def test_authorization_error_inherits_sportfwd_error(self):
        """AuthorizationError should inherit from SportFwdError."""
        error = AuthorizationError("Insufficient permissions")
        assert isinstance(error, SportFwdError)


class TestExternalServiceError:
    def test_external_service_error_inherits_sportfwd_error(self):
        """ExternalServiceError should inherit from SportFwdError."""
        error = ExternalServiceError("Connection failed", service="twilio")
        assert isinstance(error, SportFwdError)

    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="twilio")
        assert error.service == "twilio"

    def test_external_service_error_includes_service_in_details(self):
        """ExternalServiceError should include service in details."""
        error = ExternalServiceError("Connection failed", service="twilio")
        result = error.to_dict()

        assert result["details"]["service"] == "twilio"

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="twilio",
            details={"status_code": 500}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "twilio"
        assert result["details"]["status_code"] == 500


class TestConflictError:
    def test_conflict_error_inherits_sportfwd_error(self):
        """ConflictError should inherit from SportFwdError."""
        error = ConflictError("Already connected", code="ALREADY_CONNECTED")
        assert isinstance(error, SportFwdError)
        assert error.to_dict()["error"] == "ALREADY_CONNECTED"
