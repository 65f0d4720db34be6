class MovementError(Exception):
    """Base class for movement workflow failures."""


class ValidationError(MovementError):
    """Raised for a missing or unknown movement id. Never mutates state."""


class ConflictError(MovementError):
    """Raised when the movement is not in a state that allows the transition."""


class OperationFailure(MovementError):
    """Raised when the backend call fails after the optimistic update."""
