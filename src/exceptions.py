from typing import ClassVar


class AppException(Exception):
    """Base of all errors the service reports to clients.

    `kind` is a stable machine-checkable identifier, `detail` a human-readable summary and `details`
    an optional list of individual problems (e.g. every invalid field of a submission).
    """

    kind: ClassVar[str] = "internal_error"
    status_code: ClassVar[int] = 500

    def __init__(self, detail: str, details: list[str] | None = None):
        self.detail = detail
        self.details = details or []
        super().__init__(detail)


class InvalidInputException(AppException):
    kind = "invalid_input"
    status_code = 400


class InvalidCredentialException(AppException):
    kind = "invalid_credential"
    status_code = 401


class UnauthorizedException(AppException):
    kind = "unauthorized"
    status_code = 401

    MESSAGES = {
        "missing token": "No session token found. Please login first.",
        "invalid signature": "Invalid session token. Please login again.",
        "expired": "Session token has expired. Please login again.",
        "malformed payload": "Invalid token payload. Please login again.",
    }

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(self.MESSAGES.get(reason, "Unauthorized"), details=[reason])


class ForbiddenException(AppException):
    kind = "forbidden"
    status_code = 403


class NotFoundException(AppException):
    kind = "not_found"
    status_code = 404

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"{what.capitalize()} not found")


class ValidationFailedException(AppException):
    kind = "validation_failed"
    status_code = 400

    def __init__(self, details: list[str]):
        super().__init__("Validation failed", details=details)


class ConfigException(AppException):
    kind = "config_error"
    status_code = 500

    def __init__(self, detail: str):
        super().__init__("Server configuration error", details=[detail])


class ExternalServiceException(AppException):
    kind = "external_service_error"
    status_code = 503

    def __init__(self, service: str, detail: str):
        self.service = service
        super().__init__(f"{service} is unavailable. Please try again later.", details=[detail])
