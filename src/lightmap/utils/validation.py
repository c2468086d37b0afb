"""Validation utilities for pair sequences and serialized LightMaps."""

import json
from typing import Any, List, Tuple
from ..types import ValidationResult, ValidationError, ErrorType


MAX_RECOMMENDED_DEPTH = 20


class ValidationUtils:
    """Utility class for validating pair-shaped data."""

    @staticmethod
    def is_pair(value: Any) -> bool:
        """Return True if value is a list or tuple of exactly two items."""
        return isinstance(value, (list, tuple)) and len(value) == 2

    @staticmethod
    def is_hashable(value: Any) -> bool:
        """Return True if value can be used as a dict key."""
        try:
            hash(value)
        except TypeError:
            return False
        return True

    @staticmethod
    def is_pair_sequence(value: Any) -> bool:
        """
        Check whether value looks like the entries of a map.

        A list or tuple qualifies when every element is a pair whose first
        item is hashable. An empty sequence qualifies as well. Pairs keyed by
        lists (e.g. ``[[0, 0], [1, 1]]`` segments) stay plain sequences.

        Args:
            value: Value to inspect

        Returns:
            True if value should be promoted to a nested LightMap
        """
        return isinstance(value, (list, tuple)) and all(
            ValidationUtils.is_pair(item) and ValidationUtils.is_hashable(item[0])
            for item in value
        )

    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth of lists and tuples."""
        if not isinstance(data, (list, tuple)):
            return current_depth

        max_child_depth = current_depth
        for item in data:
            child_depth = ValidationUtils.calculate_max_depth(item, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

    @staticmethod
    def validate_entries(data: Any) -> ValidationResult:
        """
        Validate decoded data as the entries of a LightMap.

        Args:
            data: Decoded JSON value

        Returns:
            ValidationResult with validation details
        """
        errors, warnings = ValidationUtils._validate_entries_structure(data)
        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _validate_entries_structure(data: Any) -> Tuple[List[ValidationError], List[str]]:
        errors = []
        warnings = []

        if not isinstance(data, list):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be a list of [key, value] pairs, got {type(data).__name__}",
                location="root"
            ))
            return errors, warnings

        for index, item in enumerate(data):
            if not ValidationUtils.is_pair(item):
                length = len(item) if isinstance(item, (list, tuple)) else None
                detail = f"length {length}" if length is not None else type(item).__name__
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Entry must be a [key, value] pair, got {detail}",
                    location=f"[{index}]"
                ))
                continue

            key = item[0]
            if not ValidationUtils.is_hashable(key):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Key must be hashable, got {type(key).__name__}",
                    location=f"[{index}][0]"
                ))

        max_depth = ValidationUtils.calculate_max_depth(data)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). This may impact performance.")

        return errors, warnings

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON text holding a serialized LightMap.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=[])

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=[])

        return ValidationUtils.validate_entries(data)
