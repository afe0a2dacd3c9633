"""Exceptions raised by lift-log operations."""


class LiftLogError(Exception):
    """Base class for lift-log errors."""


class ValidationError(LiftLogError, ValueError):
    """User input was rejected before any state was changed."""


class NotFoundError(LiftLogError, LookupError):
    """A workout entry or program identifier does not exist."""
