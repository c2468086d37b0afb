"""JSON parser for the array-of-pairs LightMap format."""

import json
import logging
from typing import Any, Mapping, Optional, Union
from .types import InvalidInputError, LightMapOptions
from .error_handler import ErrorHandler
from .light_map import LightMap, LightMapJSONEncoder


class LightMapParser:
    """
    Reads and writes LightMaps as JSON text.

    The text format is the one produced by ``LightMap.to_string``: a JSON
    array of ``[key, value]`` pairs, nested maps written the same way.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None,
                 options: Union[LightMapOptions, Mapping, None] = None):
        """
        Initialize the parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
            options: Options for the LightMaps built by ``parse``
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)
        self.options = LightMapOptions.coerce(options)

    def parse(self, json_string: str) -> LightMap:
        """
        Parse JSON text into a LightMap.

        Args:
            json_string: JSON array of ``[key, value]`` pairs

        Returns:
            LightMap built from the pairs

        Raises:
            InvalidInputError: If the text is not valid JSON or not a list of pairs
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise InvalidInputError(
                f"Invalid LightMap input: {'; '.join(error_messages)}",
                validation_result.errors[0].type,
                context=validation_result.errors
            )

        data = json.loads(json_string)
        light_map = LightMap(data, self.options)

        self.logger.info(f"Parsed LightMap with {light_map.size} top-level entries")
        return light_map

    def dumps(self, value: Any, indent: Optional[int] = None) -> str:
        """
        Encode value as JSON, writing any LightMap in its pair form.

        Args:
            value: LightMap or any JSON-compatible value containing LightMaps
            indent: Optional indentation level

        Returns:
            JSON text
        """
        separators = None if indent is not None else (",", ":")
        return json.dumps(
            value,
            cls=LightMapJSONEncoder,
            indent=indent,
            separators=separators,
            ensure_ascii=False
        )
