"""
Attribute filtering of transport activity data.

A TAD is flattened into a map of dotted keys to lower-cased string values,
e.g. ``{"origin": {"city": "Basel"}}`` becomes ``{"origin.city": "basel"}``
and array items are indexed as ``energyCarriers[0].energyCarrier``.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ileap.pydantic_models.logistics import Tad

logger = logging.getLogger(__name__)

UNFLATTENED_KEYS = {"consignmentIds"}


def _flat_value(value: Any) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value.lower()
    return str(value)


def flatten_record(record: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """
    Flatten a wire-form JSON object.

    Args:
        record: Parsed JSON object
        prefix: Key prefix of the enclosing object, including its trailing dot

    Returns:
        Dict of flattened keys to lower-cased values. Booleans and nulls are
        dropped, ``consignmentIds`` is not flattened.
    """
    flattened: dict[str, str] = {}
    for key, value in record.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flattened.update(flatten_record(value, f"{path}."))
        elif isinstance(value, list):
            if key in UNFLATTENED_KEYS:
                continue
            for index, item in enumerate(value):
                item_path = f"{path}[{index}]"
                if isinstance(item, Mapping):
                    flattened.update(flatten_record(item, f"{item_path}."))
                elif (flat := _flat_value(item)) is not None:
                    flattened[item_path] = flat
        elif (flat := _flat_value(value)) is not None:
            flattened[path] = flat
    return flattened


def matches(flattened: Mapping[str, str], name: str, values: Iterable[str]) -> bool:
    """True if a key containing ``name`` holds one of ``values``, ignoring case."""
    wanted = {value.lower() for value in values}
    return any(name in key and value in wanted for key, value in flattened.items())


def filter_tads(tads: list[Tad], filters: Mapping[str, list[str]]) -> list[Tad]:
    """
    Select the TADs matching any of the attribute filters.

    Args:
        tads: Records to filter
        filters: Attribute name to accepted values

    Returns:
        Matching TADs in their original order, or all TADs without filters
    """
    if not filters:
        return list(tads)

    selected = []
    for tad in tads:
        flattened = flatten_record(tad.model_dump(mode="json"))
        if any(matches(flattened, name, values) for name, values in filters.items()):
            selected.append(tad)

    logger.info(f"{len(selected)} of {len(tads)} TADs match filters {dict(filters)}")
    return selected
