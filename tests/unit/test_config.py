"""Tests for reader configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → numeric fields)
- Fail-fast range validation
- Config effect on parsing
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from geojson_import.core.config import ConfigValidationError, ReaderConfig, validate_config
from geojson_import.reader import parse_data_set


class TestReaderConfigDefaults:
    """Verify default configuration values."""

    def test_default_encoding(self) -> None:
        cfg = ReaderConfig()
        assert cfg.encoding == "utf-8"

    def test_default_nesting_depth(self) -> None:
        cfg = ReaderConfig()
        assert cfg.max_nesting_depth == 32

    def test_defaults_are_valid(self) -> None:
        validate_config(ReaderConfig())


class TestReaderConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {"GEOJSON_ENCODING": "latin-1", "GEOJSON_MAX_NESTING_DEPTH": "4"}
        with patch.dict(os.environ, env, clear=False):
            cfg = ReaderConfig.from_env()

        assert cfg.encoding == "latin-1"
        assert cfg.max_nesting_depth == 4

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = ReaderConfig.from_env()

        assert cfg == ReaderConfig()

    def test_non_integer_depth_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"GEOJSON_MAX_NESTING_DEPTH": "deep"}, clear=False),
            pytest.raises(ValueError),
        ):
            ReaderConfig.from_env()


class TestReaderConfigValidation:
    """Fail-fast validation of out-of-range values."""

    def test_zero_depth_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOJSON_MAX_NESTING_DEPTH": "0"}, clear=False),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            ReaderConfig.from_env()
        assert exc_info.value.key == "GEOJSON_MAX_NESTING_DEPTH"
        assert exc_info.value.value == 0

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="known text codec"):
            validate_config(ReaderConfig(encoding="klingon-8"))

    def test_empty_encoding_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="must not be empty"):
            validate_config(ReaderConfig(encoding=""))

    def test_error_payload(self) -> None:
        err = ConfigValidationError("GEOJSON_ENCODING", "x", "bad")
        payload = err.to_error_dict()
        assert payload["stage"] == "config"
        assert payload["code"] == "CONFIG_VALIDATION_FAILED"
        assert "GEOJSON_ENCODING" in str(err)


class TestConfigAppliedToParse:
    """Configured values change parse behaviour."""

    def test_encoding_used_for_bytes(self) -> None:
        payload = '{"type": "Feature", "properties": {"name": "Café"}, "geometry": {"type": "Point", "coordinates": [0, 0]}}'
        data_set = parse_data_set(payload.encode("latin-1"), config=ReaderConfig(encoding="latin-1"))
        (point,) = data_set.points
        assert point.tags == {"name": "Café"}
