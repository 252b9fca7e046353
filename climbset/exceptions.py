"""Exception hierarchy for the hold editing engine.

All package exceptions derive from ClimbsetError, enabling callers to
catch any engine error with a single except clause.
"""


class ClimbsetError(Exception):
    """Base class for all climbset errors.

    Attributes:
        message: Human-readable description of the error.

    Example:
        >>> try:
        ...     to_percentage(10, 10, 0, 0)
        ... except ClimbsetError as exc:
        ...     print(exc.message)
    """

    def __init__(self, message: str) -> None:
        """Initialize ClimbsetError with a message.

        Args:
            message: Description of the error that occurred.
        """
        self.message = message
        super().__init__(self.message)


class CoordinateMappingError(ClimbsetError):
    """Raised when pixel/percentage conversion is requested before layout.

    This exception is raised when:
    - The container width or height is zero
    - The container width or height is negative

    Example:
        >>> raise CoordinateMappingError("Container width must be positive, got 0")
    """


class DraftPersistenceError(ClimbsetError):
    """Raised when the draft store cannot read or write its slot.

    The editing session treats this as non-fatal: the in-memory hold set
    stays the source of truth and the failure is only logged.

    Example:
        >>> raise DraftPersistenceError("Failed to write draft: disk full")
    """


class ConfigurationError(ClimbsetError):
    """Raised when there are issues with configuration loading or validation."""
