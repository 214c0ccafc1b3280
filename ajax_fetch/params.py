"""Query string serialization with jQuery.param bracket rules."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import quote

# Characters encodeURIComponent leaves alone (alphanumerics are always safe).
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Stands in for a missing record field (JavaScript's undefined).
_UNDEFINED = object()


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_object(value: Any) -> bool:
    # typeof null === "object" in the browser, so None counts here too.
    return value is None or isinstance(value, Mapping) or _is_array(value)


def _number_to_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def _to_string(value: Any) -> str:
    """Stringify a value the way JavaScript's ``String()`` does."""
    if value is None:
        return "null"
    if value is _UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_to_string(value)
    if _is_array(value):
        return ",".join(
            "" if item is None or item is _UNDEFINED else _to_string(item) for item in value
        )
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def _encode(value: Any) -> str:
    return quote(_to_string(value), safe=_URI_COMPONENT_SAFE)


def _record_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, _UNDEFINED)
    return getattr(record, name, _UNDEFINED)


def serialize_query_params(query_params: Any) -> str:
    """Turn the data of a request into a query param string.

    Follows jQuery.param exactly, so nested structures use bracket notation:

        >>> serialize_query_params({"a": [1, 2], "b": {"c": "x y"}})
        'a%5B%5D=1&a%5B%5D=2&b%5Bc%5D=x+y'

    A top-level list is read as ``{"name": ..., "value": ...}`` records; a
    missing field serializes as ``undefined`` for the name and ``""`` for the
    value. A top-level string is keyed by character index.

    Args:
        query_params: Mapping (or list of name/value records) to serialize.

    Returns:
        The encoded query string, without a leading ``?``.
    """
    pairs: list[str] = []

    def add(key: Any, value: Any) -> None:
        # A callable's result is used as is, so None from it becomes "null".
        if callable(value):
            value = value()
        elif value is None or value is _UNDEFINED:
            value = ""
        pairs.append(f"{_encode(key)}={_encode(value)}")

    def build_params(prefix: str, obj: Any) -> None:
        if prefix:
            if _is_array(obj):
                for index, item in enumerate(obj):
                    if prefix.endswith("[]"):
                        add(prefix, item)
                    else:
                        slot = index if _is_object(item) else ""
                        build_params(f"{prefix}[{slot}]", item)
            elif isinstance(obj, Mapping):
                for key, item in obj.items():
                    build_params(f"{prefix}[{_to_string(key)}]", item)
            else:
                add(prefix, obj)
        elif _is_array(obj):
            for record in obj:
                add(_record_field(record, "name"), _record_field(record, "value"))
        elif isinstance(obj, Mapping):
            for key, item in obj.items():
                build_params(_to_string(key), item)
        elif isinstance(obj, str):
            # A string is walked by index, one character per key.
            for index, char in enumerate(obj):
                build_params(str(index), char)

    build_params("", query_params)
    return "&".join(pairs).replace("%20", "+")
