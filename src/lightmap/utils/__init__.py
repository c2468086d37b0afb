"""Utility functions for LightMap."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
