"""Errors raised when inputs fall outside a calculator's domain."""


class ProjectionError(ValueError):
    pass


class InvalidPropertyError(ProjectionError):
    """Property record cannot be projected (e.g. non-positive price)."""


class InvalidAssumptionError(ProjectionError):
    """User assumptions make a calculation undefined (e.g. zero equity for yield)."""
