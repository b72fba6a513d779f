"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    ClubError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class TestClubError:
    def test_club_error_message(self):
        """ClubError should store message."""
        error = ClubError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_club_error_default_code(self):
        """ClubError should default code to class name."""
        assert ClubError("Test error").code == "ClubError"

    def test_club_error_custom_code(self):
        assert ClubError("Test error", code="CUSTOM_ERROR").code == "CUSTOM_ERROR"

    def test_club_error_default_details(self):
        assert ClubError("Test error").details == {}

    def test_club_error_to_dict(self):
        """to_dict should carry the message under "error"."""
        error = ClubError("Test error", code="TEST_ERROR", details={"key": "value"})

        assert error.to_dict() == {
            "error": "Test error",
            "code": "TEST_ERROR",
            "details": {"key": "value"},
        }


class TestStatusCodes:
    def test_status_codes(self):
        assert ClubError("x").status_code == 400
        assert NotFoundError("x").status_code == 404
        assert ValidationError("x").status_code == 400
        assert AuthenticationError("x").status_code == 401
        assert AuthorizationError("x").status_code == 403
        assert ExternalServiceError("x", service="supabase").status_code == 502

    def test_subclasses_inherit_club_error(self):
        for cls in (NotFoundError, ValidationError, AuthenticationError, AuthorizationError):
            assert isinstance(cls("x"), ClubError)


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="supabase")
        assert error.service == "supabase"
        assert error.to_dict()["details"]["service"] == "supabase"

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="supabase",
            details={"status_code": 500}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "supabase"
        assert result["details"]["status_code"] == 500
