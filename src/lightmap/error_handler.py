"""Error handling for LightMap input and conversions."""

import logging
from typing import Optional
from .types import (
    ValidationResult,
    ValidationError,
    ErrorResponse,
    LightMapError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Validates serialized LightMap input and turns errors into responses.

    Used by the parser before decoding and by the command line to report
    failures with a suggested fix.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate JSON text holding ``[key, value]`` pairs.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_error(self, error: LightMapError) -> ErrorResponse:
        """
        Map a LightMap error to a suggested action.

        Args:
            error: LightMapError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"LightMap error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Fix the JSON syntax of the input and retry."
            )
        elif error.error_type == ErrorType.STRUCTURE:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Provide a JSON array of [key, value] pairs, "
                                 "for example [[\"key\", \"value\"]]."
            )
        elif error.error_type == ErrorType.CIRCULAR:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Remove circular references between nested maps. "
                                 "A map cannot contain itself or one of its ancestors."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )
