"""Custom exception classes for the Report Service."""


class ReportServiceError(Exception):
    """Base exception carrying a client-facing code, message and HTTP status."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(ReportServiceError):
    """Malformed client input (IMEI, status, empty patch)."""

    def __init__(self, message: str):
        super().__init__("VALIDATION_ERROR", message, status_code=400)


class AuthenticationError(ReportServiceError):
    """Missing admin session or wrong password."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__("UNAUTHORIZED", message, status_code=401)


class RateLimitedError(ReportServiceError):
    """Too many failed logins from one origin."""

    def __init__(self, message: str = "Too many attempts. Try later."):
        super().__init__("TOO_MANY_ATTEMPTS", message, status_code=429)


class NotFoundError(ReportServiceError):
    """Resource not found."""

    def __init__(self, resource: str = "Report"):
        super().__init__("NOT_FOUND", f"{resource} not found", status_code=404)


class ServerError(ReportServiceError):
    """Opaque server-side failure."""

    def __init__(self, message: str = "Server error"):
        super().__init__("SERVER_ERROR", message, status_code=500)
