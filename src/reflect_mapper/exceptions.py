"""Exception hierarchy for reflective mapping errors."""

from typing import Any, Dict, Optional, Sequence


class MapperError(Exception):
    """Base exception for all mapping-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}'"
            f")"
        )


class NotWritableError(MapperError):
    """Raised when a property has neither a public setter nor a public field.

    ``property_names`` holds every rejected key in input order; ``property_name``
    is the first of them.
    """

    def __init__(
        self,
        property_names: Sequence[str],
        class_name: Optional[str] = None,
        error_code: str = "NOT_WRITABLE",
        details: Optional[Dict[str, Any]] = None,
    ):
        if isinstance(property_names, str):
            property_names = [property_names]
        self.property_names = list(property_names)
        self.property_name = self.property_names[0] if self.property_names else ""
        self.class_name = class_name or "Object"

        message = f"{self.class_name}.{', '.join(self.property_names)} is not writable."
        super().__init__(message, error_code, details)
        self.details["property_names"] = self.property_names
        self.details["class_name"] = self.class_name


class InvalidStructureError(MapperError):
    """Raised when a key-value structure was expected but something else arrived."""

    def __init__(
        self,
        message: str = "Expected a key-value structure",
        error_code: str = "INVALID_STRUCTURE",
        details: Optional[Dict[str, Any]] = None,
        received_type: Optional[str] = None,
    ):
        super().__init__(message, error_code, details)
        if received_type:
            self.details["received_type"] = received_type


class ConfigurationError(MapperError):
    """Raised for unreadable or invalid configuration."""

    def __init__(
        self,
        message: str = "Configuration error",
        error_code: str = "CONFIGURATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
    ):
        super().__init__(message, error_code, details)
        if config_path:
            self.details["config_path"] = config_path
