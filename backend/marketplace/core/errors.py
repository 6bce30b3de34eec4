# marketplace/core/errors.py
"""
Error taxonomy for the marketplace API.

Every domain failure is raised as a ``MarketplaceError`` subclass. The class
carries the HTTP status and a default message, and a single exception handler
in ``marketplace.main`` turns it into a ``{"message": ...}`` JSON body.
"""


class MarketplaceError(Exception):
    status_code = 500
    message = "internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class InternalError(MarketplaceError):
    pass


class ValidationError(MarketplaceError):
    status_code = 400
    message = "invalid request"


class ConflictError(MarketplaceError):
    status_code = 409
    message = "conflict"


class InvalidCredentials(MarketplaceError):
    status_code = 401
    message = "invalid credentials"


class NotFound(MarketplaceError):
    status_code = 404
    message = "not found"


class AlreadyFavorited(MarketplaceError):
    status_code = 409
    message = "already favorited"


# ----- Auth gate failures (all 401, each with its own reason) -----
class AuthError(MarketplaceError):
    status_code = 401
    message = "unauthorized"


class MissingToken(AuthError):
    message = "Missing Authorization header"


class MalformedHeader(AuthError):
    message = "Invalid Authorization format"


class InvalidToken(AuthError):
    message = "Invalid token"


class ExpiredToken(AuthError):
    message = "Token expired"


class UnknownUser(AuthError):
    message = "User not found"
