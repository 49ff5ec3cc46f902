"""
errors.py — API error taxonomy.
Services raise these; the app turns them into the {success: false, message} envelope.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "User not authenticated"


class NotFound(ApiError):
    status_code = 404
    default_message = "Resource not found"


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation error"


class InternalError(ApiError):
    status_code = 500
    default_message = "Internal server error"
