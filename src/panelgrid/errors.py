"""Exception classes for panelgrid."""

from pathlib import Path


class PanelGridError(Exception):
    """Base exception for panelgrid errors."""

    pass


class ValidationError(PanelGridError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class ConfigError(PanelGridError):
    """Exception raised when a console definition cannot be loaded."""

    def __init__(self, path: Path | str | None, reason: str) -> None:
        """Initialize config error.

        Args:
            path: Definition file (None for in-memory definitions)
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        source = path if path is not None else "<string>"
        super().__init__(f"Invalid console definition {source}: {reason}")


class BackendError(PanelGridError):
    """Exception raised when the scene backend fails to create a node."""

    def __init__(self, reason: str) -> None:
        """Initialize backend error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Backend operation failed: {reason}")


class DestroyedError(PanelGridError):
    """Exception raised when a destroyed element is used again."""

    def __init__(self, element: str) -> None:
        """Initialize destroyed error.

        Args:
            element: Description of the element
        """
        self.element = element
        super().__init__(f"{element} has been destroyed")
