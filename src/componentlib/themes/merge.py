"""
Deep merge for theme configuration mappings.

Rules:
- mapping onto mapping: merged key by key, recursively
- anything else (strings, numbers, lists, tuples, callables, None): the
  override value replaces the base value wholesale
- keys only present in base are carried through unchanged

Lists are never merged element-wise, so a shadow sequence in an override
replaces the whole default sequence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _is_plain_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge ``override`` onto ``base`` without mutating either.

    An explicit ``None`` in ``override`` replaces the base value; a missing
    key leaves the base value in place.

    Args:
        base: Default configuration
        override: Partial configuration whose values take precedence

    Returns:
        New merged dict. Untouched subtrees are shared with ``base``; mappings
        from ``override`` are always copied.
    """
    result = dict(base)
    for key, value in override.items():
        current = base.get(key)
        if _is_plain_mapping(value):
            result[key] = deep_merge(current if _is_plain_mapping(current) else {}, value)
        else:
            result[key] = value
    return result
