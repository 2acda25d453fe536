# services/property_bag.py
"""Merge engine for partial property bags.

A property bag maps schema keys to values; any key may be unset, in which
case the Default Table applies.  Bags handed out by this module are
read-only snapshots, so callers always get a fresh object and can never
mutate shared state by accident.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .property_schema import DEFAULT_PROPERTIES, SCHEMA, is_known

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

PropertyBag = Mapping[str, Any]

EMPTY_BAG: PropertyBag = MappingProxyType({})


def _freeze(value: Any) -> Any:
    # Lists arrive from JSON; tuples keep snapshots immutable and comparable.
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def make_bag(values: Optional[Mapping[str, Any]] = None) -> PropertyBag:
    """Build a read-only bag from ``values``, dropping unknown keys."""
    return merge(EMPTY_BAG, values or {})


def merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> PropertyBag:
    """Return a new bag where every key in ``override`` replaces ``base``.

    Keys absent from ``override`` keep their ``base`` value.  Neither input
    is modified.  Keys outside the schema are logged and dropped instead of
    being stored.
    """
    result: Dict[str, Any] = dict(base)
    unknown: List[Any] = []
    for key, value in override.items():
        if not is_known(key):
            unknown.append(key)
            continue
        result[key] = _freeze(value)
    if unknown:
        logger.warning("Ignoring unknown property keys: %s", ", ".join(map(repr, unknown)))
    return MappingProxyType(result)


def resolve(bag: Mapping[str, Any]) -> PropertyBag:
    """Return the complete view of ``bag`` over the Default Table."""
    return merge(DEFAULT_PROPERTIES, bag)


def diff_from_defaults(bag: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the resolved entries of ``bag`` that differ from their default.

    The result is ordered like the schema.
    """
    resolved = resolve(bag)
    return {
        key: resolved[key]
        for key in SCHEMA
        if resolved[key] != DEFAULT_PROPERTIES[key]
    }


def to_plain_dict(bag: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a mutable, JSON-friendly copy of ``bag`` (tuples become lists)."""
    return {
        key: list(value) if isinstance(value, tuple) else value
        for key, value in bag.items()
    }
