"""
Domain error kinds. Only the HTTP layer (main.py handlers) maps them to status codes.
"""


class AppError(Exception):
    """Base class for errors the API reports with a classified status."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404


class AlreadyExistsError(AppError):
    status_code = 409


class InvalidInputError(AppError):
    status_code = 400


class GatewayError(AppError):
    """External job search call failed (network, non-200, undecodable body)."""

    status_code = 500
