"""Typed failures raised by the store and the authorization layer.

Only the application's exception handlers turn these into HTTP responses.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message=None, headers=None):
        self.message = message if message is not None else self.default_message
        self.headers = headers
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not Found"


class BadRequestError(AppError):
    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"
