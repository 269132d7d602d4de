"""
Custom exceptions for the application.
"""


class SpaceshipException(Exception):
    """Base exception for all Spaceship application exceptions."""
    pass


class ValidationError(SpaceshipException):
    """Raised when validation fails."""
    pass


class NotFoundError(SpaceshipException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(SpaceshipException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass
