# core/errors.py
"""
Domain errors.

Every failure a service can produce is one of these. They are plain
APIException subclasses so DRF routes them through the envelope handler
in core.exceptions. This module only depends on rest_framework.exceptions
so authentication classes can import it while DRF itself is loading.
"""
from rest_framework.exceptions import APIException
from rest_framework import status


class DomainError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request could not be processed."
    default_code = "error"


class ValidationFailed(DomainError):
    default_detail = "Invalid input."
    default_code = "validation_error"


class Unauthenticated(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "No token provided, authorization denied"
    default_code = "unauthenticated"


class InvalidCredentials(Unauthenticated):
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class Forbidden(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied. Insufficient permissions."
    default_code = "forbidden"


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class Conflict(DomainError):
    # Conceptually a 409; the public API has always answered 400.
    default_detail = "Resource already exists"
    default_code = "conflict"


class AccountExists(Conflict):
    default_detail = "User already exists"
    default_code = "account_exists"


class DuplicateRegistration(Conflict):
    default_detail = "You have already registered for this event"
    default_code = "duplicate_registration"


class InvalidCode(DomainError):
    default_detail = "Invalid OTP"
    default_code = "invalid_code"


class CodeExpired(DomainError):
    default_detail = "OTP has expired"
    default_code = "code_expired"


class AlreadyVerified(DomainError):
    default_detail = "Email is already verified"
    default_code = "already_verified"


class EventUnavailable(NotFound):
    default_detail = "Event not found or not available"
    default_code = "event_unavailable"


class RegistrationClosed(DomainError):
    default_detail = "Registration is closed for this event"
    default_code = "registration_closed"


class EventFull(DomainError):
    default_detail = "Event is full"
    default_code = "event_full"
