"""Convert layout results into JSON-serializable data for a renderer."""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from fractions import Fraction
from typing import Any


def to_serializable(obj: Any) -> Any:
    """Convert a dataclass hierarchy to JSON-serializable data.

    Handles nested dataclasses, lists and enum values. Converts all
    snake_case field names to camelCase.

    Args:
        obj: Object to serialize (dataclass, dict, list or scalar)

    Returns:
        JSON-serializable value
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        # Field by field, since read-only track mappings cannot be deep-copied
        return _convert_dict_keys({f.name: getattr(obj, f.name) for f in fields(obj)})
    return _process_value(obj)


def _convert_dict_keys(d: Mapping) -> dict:
    """Recursively convert dict keys from snake_case to camelCase."""
    result = {}
    for key, value in d.items():
        if key == "tracks" and isinstance(value, Mapping):
            # Keyed by track name, which is data rather than a field name
            result[key] = {name: _process_value(track) for name, track in value.items()}
            continue

        if isinstance(key, str) and "_" in key:
            camel_key = _to_camel_case(key)
        else:
            camel_key = key

        result[camel_key] = _process_value(value)
    return result


def _process_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_serializable(value)
    elif isinstance(value, Mapping):
        return _convert_dict_keys(value)
    elif isinstance(value, (list, tuple)):
        return [_process_value(item) for item in value]
    elif isinstance(value, Enum):
        return value.name.lower()
    elif isinstance(value, Fraction):
        return float(value)
    else:
        return value


def _to_camel_case(snake_str: str) -> str:
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
