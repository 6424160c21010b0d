"""Structural checks on decoded GeoJSON members.

Responsibilities:
- Reader exceptions (public API, re-exported from ``__init__``)
- Required-member lookups with type checks (string, array, object)

Every failed check raises ``IllegalDataError`` naming the member, the
expected JSON type and what was found, so the caller can point a user
at the broken part of the document.
"""

from __future__ import annotations

from geojson_import.core.constants import PARSE_STAGE, READ_STAGE
from geojson_import.core.exceptions import GeoJsonImportError, PermanentError, ValidationError

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class IllegalDataError(ValidationError):
    """Raised when the document is not usable GeoJSON. Aborts the parse."""

    default_stage = PARSE_STAGE
    default_code = "GEOJSON_ILLEGAL_DATA"


class ParseCancelledError(PermanentError):
    """Raised when the progress monitor reports cancellation."""

    default_stage = PARSE_STAGE
    default_code = "GEOJSON_PARSE_CANCELLED"


class SourceReadError(GeoJsonImportError):
    """Raised when a GeoJSON file cannot be read from disk.

    ``retryable`` follows the underlying ``OSError``. A path that does not
    exist or may not be opened stays broken; other I/O failures may pass
    on a later attempt.
    """

    default_stage = READ_STAGE
    default_code = "GEOJSON_SOURCE_UNREADABLE"

    _PERMANENT_CAUSES = (FileNotFoundError, IsADirectoryError, NotADirectoryError, PermissionError)

    @classmethod
    def from_os_error(cls, name: str, exc: OSError) -> SourceReadError:
        """Wrap ``exc`` raised while reading the file ``name``."""
        msg = f"Cannot read GeoJSON file {name}: {exc}"
        return cls(msg, retryable=not isinstance(exc, cls._PERMANENT_CAUSES))


# ---------------------------------------------------------------------------
# Member lookups
# ---------------------------------------------------------------------------


def json_type_name(value: object) -> str:
    """Name ``value``'s JSON type the way a GeoJSON author would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return "number"


def _require(obj: dict[str, object], key: str, expected: type, label: str, where: str) -> object:
    if key not in obj:
        msg = f"Missing required member '{key}' in {where}"
        raise IllegalDataError(msg)
    value = obj[key]
    if not isinstance(value, expected):
        msg = f"Member '{key}' in {where} must be {label}, got {json_type_name(value)}"
        raise IllegalDataError(msg)
    return value


def require_string(obj: dict[str, object], key: str, where: str) -> str:
    """Return ``obj[key]``, which must be a JSON string."""
    return _require(obj, key, str, "a string", where)  # type: ignore[return-value]


def require_array(obj: dict[str, object], key: str, where: str) -> list[object]:
    """Return ``obj[key]``, which must be a JSON array."""
    return _require(obj, key, list, "an array", where)  # type: ignore[return-value]


def as_array(value: object, where: str) -> list[object]:
    """Return ``value`` if it is a JSON array, else raise ``IllegalDataError``."""
    if not isinstance(value, list):
        msg = f"Expected an array for {where}, got {json_type_name(value)}"
        raise IllegalDataError(msg)
    return value


def as_object(value: object, where: str) -> dict[str, object]:
    """Return ``value`` if it is a JSON object, else raise ``IllegalDataError``."""
    if not isinstance(value, dict):
        msg = f"Expected an object for {where}, got {json_type_name(value)}"
        raise IllegalDataError(msg)
    return value
