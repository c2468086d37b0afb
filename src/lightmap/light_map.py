"""Insertion-ordered map with functional helpers and nested-map conversion."""

import functools
import json
import locale
import logging
import re
import reprlib
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .types import CircularReferenceError, ConversionHint, LightMapOptions
from .utils.validation import ValidationUtils


logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]
Entries = Union[Iterable[Any], Mapping, None]


def _collation_key(value: Any) -> Tuple[str, Tuple[bool, ...]]:
    text = str(value)
    return locale.strxfrm(text.casefold()), tuple(not char.islower() for char in text)


def locale_compare(a: Any, b: Any) -> int:
    """
    Compare two values as strings, the way a collating sort orders words.

    Letters compare case-insensitively through the current ``LC_COLLATE``
    collation; strings differing only in case put lowercase first, so
    ``b, B, a`` sorts as ``a, b, B``.
    """
    key_a, key_b = _collation_key(a), _collation_key(b)
    return (key_a > key_b) - (key_a < key_b)


def _is_light_map(value: Any) -> bool:
    return isinstance(value, LightMap) or LightMap.is_instance_of(value)


class LightMapJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes LightMaps in their array-of-pairs form."""

    def default(self, o: Any) -> Any:
        if _is_light_map(o):
            return o.to_json()
        return super().default(o)


class LightMap(MutableMapping):
    """
    Ordered key-value container with filter/map/reduce style helpers.

    Keys keep their insertion order. Every derivation (``filter``, ``map``,
    ``sort_keys``...) returns a new LightMap and leaves the receiver alone.

    When constructed, values shaped like a list of ``[key, value]`` pairs are
    promoted to nested LightMaps, so a whole tree can be written as one
    literal::

        LightMap([["key", [["keyA", "valueA"], ["keyB", [["key2", "value2"]]]]]])

    Pass ``LightMapOptions(deep_transform_to_map=False)`` (or
    ``{"deep_transform_to_map": False}``) to keep such values as they are.
    """

    def __init__(self, entries: Entries = None,
                 options: Union[LightMapOptions, Mapping, None] = None):
        """
        Initialize the map.

        Args:
            entries: Iterable of ``(key, value)`` pairs or a mapping
            options: Construction options

        Raises:
            TypeError: If entries is not iterable or a key is unhashable
            ValueError: If an entry is not a pair
        """
        self.options = LightMapOptions.coerce(options)
        data = self._collect(entries)
        if self.options.deep_transform_to_map:
            data = self._normalize_values(data, set())
        self._data: Dict[Any, Any] = data

    # Construction helpers

    @staticmethod
    def _collect(entries: Entries) -> Dict[Any, Any]:
        if entries is None:
            return {}
        if isinstance(entries, Mapping):
            return dict(entries.items())
        return dict(entries)

    @classmethod
    def _normalize_values(cls, data: Dict[Any, Any], visiting: Set[int]) -> Dict[Any, Any]:
        return {key: cls._promote(value, visiting) for key, value in data.items()}

    @classmethod
    def _promote(cls, value: Any, visiting: Set[int]) -> Any:
        """Turn a pair sequence into a nested LightMap, recursively."""
        if not ValidationUtils.is_pair_sequence(value):
            return value

        marker = id(value)
        if marker in visiting:
            raise CircularReferenceError(
                "Circular reference detected while building nested LightMap",
                context=value
            )

        visiting.add(marker)
        data = cls._normalize_values(cls._collect(value), visiting)
        visiting.remove(marker)

        nested = cls()
        nested._data = data
        logger.debug(f"Promoted pair sequence with {len(data)} entries to nested {cls.__name__}")
        return nested

    def _empty(self) -> 'LightMap':
        return type(self)()

    # Mapping protocol

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def set(self, key: Any, value: Any) -> 'LightMap':
        """Store value under key and return the map for chaining."""
        self._data[key] = value
        return self

    def has(self, key: Any) -> bool:
        return key in self._data

    def delete(self, key: Any) -> bool:
        """Remove key; return whether it was present."""
        if key in self._data:
            del self._data[key]
            return True
        return False

    @property
    def size(self) -> int:
        return len(self._data)

    # Derivations

    def filter(self, fn: Callable[[Any, Any, 'LightMap'], Any]) -> 'LightMap':
        """
        Keep the entries for which fn returns a truthy value.

        Args:
            fn: Called as ``fn(value, key, this_map)``

        Returns:
            New LightMap with the matching entries in their original order
        """
        result = self._empty()
        for key, value in self._data.items():
            if fn(value, key, self):
                result._data[key] = value
        return result

    def map(self, fn: Callable[[Any, Any, 'LightMap'], Optional[Tuple[Any, Any]]]) -> 'LightMap':
        """
        Project every entry to a new ``(key, value)`` pair.

        A falsy projected key keeps the original key. The projected value is
        stored as returned, falsy or not. When fn returns a falsy result the
        entry is stored under its original key with a value of None. Later
        entries overwrite earlier ones that project to the same key.

        Args:
            fn: Called as ``fn(value, key, this_map)``

        Returns:
            New LightMap with the projected entries
        """
        result = self._empty()
        for key, value in self._data.items():
            entry = fn(value, key, self) or (None, None)
            result._data[entry[0] or key] = entry[1]
        return result

    def reduce(self, fn: Callable[[Any, Tuple[Any, Any], Any, 'LightMap'], Any], initial: Any) -> Any:
        """
        Fold the entries from first to last.

        Args:
            fn: Called as ``fn(accumulator, (key, value), key, this_map)``
            initial: Starting accumulator

        Returns:
            The final accumulator
        """
        accumulator = initial
        for key, value in self._data.items():
            accumulator = fn(accumulator, (key, value), key, self)
        return accumulator

    def find(self, fn: Callable[[Any, Any, 'LightMap'], Any]) -> Optional[Tuple[Any, Any]]:
        """Return the first ``(key, value)`` pair matching fn, or None."""
        for key, value in self._data.items():
            if fn(value, key, self):
                return key, value
        return None

    def find_all(self, fn: Callable[[Any, Any, 'LightMap'], Any]) -> 'LightMap':
        """Alias for ``filter``."""
        return self.filter(fn)

    def sort_keys(self, comparator: Optional[Comparator] = None, reverse: bool = False) -> 'LightMap':
        """
        Return a new map ordered by key.

        Args:
            comparator: ``cmp(a, b) -> int`` on keys, locale string order by default
            reverse: Sort in descending order

        Returns:
            New LightMap with the receiver's values under the sorted keys
        """
        comparator = comparator or locale_compare
        keys = sorted(self._data, key=functools.cmp_to_key(comparator), reverse=reverse)

        result = self._empty()
        for key in keys:
            result._data[key] = self._data[key]
        return result

    def sort_values(self, comparator: Optional[Comparator] = None, reverse: bool = False) -> 'LightMap':
        """
        Return a new map whose entries are ordered by value.

        Args:
            comparator: ``cmp(a, b) -> int`` on values, locale string order by default
            reverse: Sort in descending order

        Returns:
            New LightMap with each key still paired with its own value
        """
        value_key = functools.cmp_to_key(comparator or locale_compare)
        entries = sorted(self._data.items(), key=lambda entry: value_key(entry[1]), reverse=reverse)

        result = self._empty()
        result._data = dict(entries)
        return result

    # Equality and identity

    def equals(self, other: Any) -> bool:
        """
        Deep structural comparison.

        Two maps are equal when they hold the same keys in the same order
        and equal values, nested maps being compared the same way.
        """
        if not self.is_instance_of(other):
            return False
        return self._equals(other, set())

    def _equals(self, other: 'LightMap', visiting: Set[Tuple[int, int]]) -> bool:
        if self is other:
            return True
        if len(self) != len(other):
            return False

        marker = (id(self), id(other))
        if marker in visiting:
            raise CircularReferenceError(context=self.to_string_tag)
        visiting.add(marker)

        try:
            for (key, value), (other_key, other_value) in zip(self.items(), other.items()):
                if key != other_key:
                    return False
                if _is_light_map(value):
                    if not (_is_light_map(other_value) and value._equals(other_value, visiting)):
                        return False
                elif value != other_value:
                    return False
            return True
        finally:
            visiting.remove(marker)

    def __eq__(self, other: Any) -> bool:
        if not self.is_instance_of(other):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    @classmethod
    def is_instance_of(cls, candidate: Any) -> bool:
        """
        Loose type check by class name.

        Maps coming from another copy of this package still match, where
        ``isinstance`` would not.
        """
        return candidate is not None and type(candidate).__name__ == cls.__name__

    @property
    def to_string_tag(self) -> str:
        return type(self).__name__

    @staticmethod
    def version() -> str:
        """Return the package version as ``vMAJOR.MINOR.PATCH``."""
        from . import __version__
        return f"v{__version__}"

    # Conversions

    def _enter(self, visiting: Set[int]) -> None:
        if id(self) in visiting:
            raise CircularReferenceError(context=self.to_string_tag)
        visiting.add(id(self))

    def map_to_array(self) -> List[List[Any]]:
        """
        Serialize to a list of ``[key, value]`` lists.

        Nested maps become nested pair lists, so ``LightMap(m.map_to_array())``
        rebuilds an equal map.
        """
        return self._to_array(set())

    def _to_array(self, visiting: Set[int]) -> List[List[Any]]:
        self._enter(visiting)
        pairs = []
        for key, value in self._data.items():
            if _is_light_map(value):
                value = value._to_array(visiting)
            pairs.append([key, value])
        visiting.remove(id(self))
        return pairs

    def to_object(self) -> Dict[Any, Any]:
        """
        Convert to plain nested dicts.

        Raises:
            CircularReferenceError: If a nested map contains one of its ancestors
        """
        return self._to_object(set())

    def _to_object(self, visiting: Set[int]) -> Dict[Any, Any]:
        self._enter(visiting)
        obj = {}
        for key, value in self._data.items():
            if _is_light_map(value):
                value = value._to_object(visiting)
            obj[key] = value
        visiting.remove(id(self))
        return obj

    def to_json(self) -> List[List[Any]]:
        return self.map_to_array()

    def to_string(self) -> str:
        """Compact JSON text of ``map_to_array()``."""
        return json.dumps(
            self.map_to_array(),
            cls=LightMapJSONEncoder,
            separators=(",", ":"),
            ensure_ascii=False
        )

    def to_display_string(self) -> str:
        return self.to_string()

    def to_number(self) -> int:
        return len(self._data)

    def to_primitive(self, hint: Union[ConversionHint, str, None] = None) -> Union[int, str, bool]:
        """
        Convert to a primitive according to hint.

        Args:
            hint: ``"number"``, ``"string"``, ``"boolean"``, ``"default"`` or None

        Returns:
            Entry count for number, True for boolean, JSON text otherwise

        Raises:
            ValueError: If hint is not a known ConversionHint
        """
        hint = ConversionHint(hint) if hint is not None else ConversionHint.DEFAULT

        if hint is ConversionHint.NUMBER:
            return self.to_number()
        if hint is ConversionHint.BOOLEAN:
            return True
        return self.to_display_string()

    def __str__(self) -> str:
        return self.to_display_string()

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"{self.to_string_tag}({list(self._data.items())!r})"

    # Lookup

    def index_of(self, key: Any) -> int:
        """Position of key in iteration order, or -1 if absent."""
        for index, candidate in enumerate(self._data):
            if candidate == key:
                return index
        return -1

    def search(self, key: Any) -> int:
        """Alias for ``index_of``."""
        return self.index_of(key)

    def substitute_into(self, subject: str) -> str:
        """
        Replace keys with their values in subject, in entry order.

        Only the first occurrence of each key is replaced, in the string as
        rewritten by the previous entries. Compiled regular expressions used
        as keys are matched as patterns; any other key is matched as the
        literal text ``str(key)``.

        Args:
            subject: Template text

        Returns:
            The rewritten text
        """
        for key, value in self._data.items():
            text = str(value)
            if isinstance(key, re.Pattern):
                subject = key.sub(lambda _match, text=text: text, subject, count=1)
            else:
                subject = subject.replace(str(key), text, 1)
        return subject
