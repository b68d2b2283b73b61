"""
Unit Tests for the domain exceptions
"""
import pytest

from app.domain.exceptions import (
    BadRequestException,
    ErrorCode,
    NotFoundException,
    NotImplementedException,
    PasswordManagerException,
    ServiceUnavailableException,
)


class TestDefaults:
    """Each exception kind carries its HTTP status, message and code"""

    @pytest.mark.parametrize("exc_class, status_code, message, error_code", [
        (NotFoundException, 404, "Not Found", ErrorCode.NOT_FOUND),
        (BadRequestException, 400, "Bad Request", ErrorCode.BAD_REQUEST),
        (ServiceUnavailableException, 503, "Service Unavailable", ErrorCode.SERVICE_UNAVAILABLE),
        (NotImplementedException, 501, "Not Implemented", ErrorCode.NOT_IMPLEMENTED),
    ])
    def test_defaults(self, exc_class, status_code, message, error_code):
        """Test default status code, message and error code"""
        exc = exc_class()

        assert isinstance(exc, PasswordManagerException)
        assert exc.status_code == status_code
        assert exc.message == message
        assert exc.error_code == error_code

    def test_overrides(self):
        """Test message and error code given by the caller"""
        exc = NotFoundException(message="Login not found", error_code=ErrorCode.CLIENT_NOT_FOUND)

        assert exc.status_code == 404
        assert exc.message == "Login not found"
        assert exc.error_code == ErrorCode.CLIENT_NOT_FOUND
        assert str(exc) == "Login not found"


class TestSerialization:
    """Exceptions serialize to the error response body"""

    def test_to_dict(self):
        """Test the statusCode/message/errorCode body"""
        exc = ServiceUnavailableException(
            message="Service is temporarily unavailable.",
            error_code=ErrorCode.STORAGE_DOWN,
        )

        assert exc.to_dict() == {
            "statusCode": 503,
            "message": "Service is temporarily unavailable.",
            "errorCode": "StorageDown",
        }

    def test_error_codes_are_strings(self):
        """Test error codes compare equal to their wire value"""
        assert ErrorCode.LOGIN_ALREADY_EXISTS == "LoginAlreadyExists"
        assert ErrorCode.PASSWORD_NOT_FOUND.value == "PasswordNotFound"
