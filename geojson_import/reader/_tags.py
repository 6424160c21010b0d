"""Feature properties to primitive tags.

Tag values are always strings. Property values that are not strings
keep their JSON source text rather than a Python rendering:

    ``42``           → ``"42"``
    ``1.50``         → ``"1.50"``
    ``1e5``          → ``"1e5"``
    ``true``         → ``"true"``
    ``null``         → ``"null"``
    ``{"a": [1]}``   → ``'{"a":[1]}'``
"""

from __future__ import annotations

import json
from decimal import Decimal

from geojson_import.core.constants import PROPERTIES
from geojson_import.reader._source import JsonNumber
from geojson_import.reader._validation import as_object


def extract_tags(feature: dict[str, object]) -> dict[str, str]:
    """Return the feature's properties as tags, in sorted key order.

    Absent or ``null`` properties give an empty dict.

    Raises:
        IllegalDataError: If ``properties`` is present but not an object.
    """
    raw = feature.get(PROPERTIES)
    if raw is None:
        return {}
    properties = as_object(raw, f"'{PROPERTIES}' of a Feature")
    return {key: tag_value(properties[key]) for key in sorted(properties)}


def tag_value(value: object) -> str:
    """Render one property value as a tag string."""
    if isinstance(value, str):
        return value
    return _json_text(value)


def _json_text(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, JsonNumber):
        return value.text
    if isinstance(value, int | Decimal):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ",".join(_json_text(item) for item in value) + "]"
    if isinstance(value, dict):
        members = (
            f"{json.dumps(key, ensure_ascii=False)}:{_json_text(item)}"
            for key, item in value.items()
        )
        return "{" + ",".join(members) + "}"
    return str(value)
