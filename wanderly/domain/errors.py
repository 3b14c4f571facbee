"""Domain error taxonomy.

Core operations raise these; the HTTP layer maps each one to a status code.
"""


class WanderlyError(Exception):
    """Base class for all domain failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WanderlyError):
    """An entity id does not resolve."""

    status_code = 404


class ConflictError(WanderlyError):
    """A unique field is already taken."""

    status_code = 409


class ValidationError(WanderlyError):
    """Malformed or out-of-range input."""

    status_code = 422


class UnauthorizedError(WanderlyError):
    """No principal, or credentials did not check out."""

    status_code = 401


class ForbiddenError(WanderlyError):
    """Principal is known but lacks the required role or identity."""

    status_code = 403
