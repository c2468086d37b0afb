"""Core type definitions for LightMap."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, List, Mapping, Optional, Union


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    CIRCULAR = "circular"


class ConversionHint(Enum):
    """Hints accepted by ``LightMap.to_primitive``."""
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    DEFAULT = "default"


@dataclass
class LightMapOptions:
    """Construction options for a LightMap."""
    deep_transform_to_map: bool = True

    @classmethod
    def coerce(cls, options: Union['LightMapOptions', Mapping[str, Any], None]) -> 'LightMapOptions':
        """
        Build options from an instance, a plain mapping or ``None``.

        Raises:
            TypeError: If the mapping holds an unknown option name
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"Unknown LightMap option(s): {', '.join(sorted(unknown))}")
        return cls(**options)


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class LightMapError(Exception):
    """Base exception for LightMap errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class CircularReferenceError(LightMapError):
    """Raised when a nested container graph loops back on itself."""

    def __init__(self, message: str = "Circular reference detected in nested LightMap",
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.CIRCULAR, context)


class InvalidInputError(LightMapError, ValueError):
    """Raised when serialized input cannot be turned into a LightMap."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.STRUCTURE,
                 context: Optional[Any] = None):
        super().__init__(message, error_type, context)
