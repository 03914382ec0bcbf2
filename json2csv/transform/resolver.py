"""
Field resolver - looks up a field path inside a single record.

Two lookup modes:
- Flat (default): the path is one literal key, dots included
- Nested: the path is split on "." and each segment descends one level,
  through mappings by key and through lists by integer index

Anything that cannot be found resolves to the caller's default value.
Records are never mutated.
"""
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, List, Optional


class _Missing:
    """Sentinel for a path that resolved to nothing."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment, MISSING)

    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if segment.isdigit():
            index = int(segment)
            if index < len(current):
                return current[index]

    return MISSING


def lookup(record: Any, path: str, nested: bool = False) -> Any:
    """
    Return the raw value at `path`, or MISSING.

    Args:
        record: Record to read from (any value; non-mappings never match)
        path: Field path
        nested: Treat "." as a path separator

    Returns:
        The stored value, or MISSING when absent
    """
    if record is None:
        return MISSING

    if not nested:
        return _step(record, path) if isinstance(record, Mapping) else MISSING

    current = record
    for segment in path.split("."):
        current = _step(current, segment)
        if current is MISSING:
            return MISSING

    return current


def resolve_field(record: Any, path: str, nested: bool = False, default: Any = "") -> Any:
    """
    Resolve one field of one record, substituting `default` for absent values.

    A stored None counts as absent.

    Examples:
        resolve_field({"car": {"make": "X"}}, "car.make", nested=True) → "X"
        resolve_field({"car": {"make": "X"}}, "car.make") → ""
    """
    value = lookup(record, path, nested)
    if value is MISSING or value is None:
        return default
    return value


def derive_fields(records: Iterable[Any]) -> List[str]:
    """Key order of the first non-null mapping record ([] when there is none)."""
    first: Optional[Mapping] = next(
        (r for r in records if isinstance(r, Mapping)), None
    )
    if first is None:
        return []
    return [str(key) for key in first.keys()]
