"""Reader configuration loaded from environment variables.

All values have defaults suitable for ordinary GeoJSON files, so a
``ReaderConfig()`` built without any environment is always valid.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, so bad configuration surfaces before a parse
    starts rather than halfway through one.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from geojson_import.core.constants import DEFAULT_ENCODING, DEFAULT_MAX_NESTING_DEPTH
from geojson_import.core.exceptions import GeoJsonImportError


class ConfigValidationError(GeoJsonImportError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Immutable reader configuration.

    Attributes:
        encoding: Codec used to decode byte input before JSON decoding.
        max_nesting_depth: Maximum number of nested GeometryCollection
            levels accepted before the document is rejected.
    """

    encoding: str = DEFAULT_ENCODING
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    @classmethod
    def from_env(cls) -> ReaderConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or names an
                unknown codec.
            ValueError: If ``GEOJSON_MAX_NESTING_DEPTH`` is not an integer.
        """
        config = cls(
            encoding=os.getenv("GEOJSON_ENCODING", DEFAULT_ENCODING),
            max_nesting_depth=int(
                os.getenv("GEOJSON_MAX_NESTING_DEPTH", str(DEFAULT_MAX_NESTING_DEPTH))
            ),
        )
        validate_config(config)
        return config


def validate_config(config: ReaderConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.encoding:
        raise ConfigValidationError("GEOJSON_ENCODING", config.encoding, "must not be empty")

    try:
        codecs.lookup(config.encoding)
    except LookupError as exc:
        raise ConfigValidationError(
            "GEOJSON_ENCODING",
            config.encoding,
            "must name a known text codec",
        ) from exc

    if config.max_nesting_depth < 1:
        raise ConfigValidationError(
            "GEOJSON_MAX_NESTING_DEPTH",
            config.max_nesting_depth,
            "must be >= 1",
        )
