"""Domain errors raised by services and mapped to HTTP responses in main.py"""


class DaycareError(Exception):
    """Base class for errors that carry an HTTP status code"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DaycareError):
    """Malformed or missing required input"""

    status_code = 400


class AuthenticationError(DaycareError):
    """Missing credentials or insufficient role"""

    status_code = 401


class NotFoundError(DaycareError):
    """Referenced entity does not exist"""

    status_code = 404


class ConflictError(DaycareError):
    status_code = 409
