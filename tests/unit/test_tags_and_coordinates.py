"""Tests for tag extraction, coordinate extraction and the JSON value source.

Covers:
- Property values rendered in their JSON source form
- Absent / null / mistyped properties
- Position validation (arity, types, finiteness)
- Top-level value iteration over str, bytes and streams
"""

from __future__ import annotations

import io
from decimal import Decimal

import pytest

from geojson_import.models.primitives import LatLon
from geojson_import.reader import IllegalDataError, extract_tags, tag_value
from geojson_import.reader._coordinates import extract_latlon, extract_positions
from geojson_import.reader._source import JsonNumber, iter_values, read_text

# ---------------------------------------------------------------------------
# Tests: tag extraction
# ---------------------------------------------------------------------------


class TestTagValue:
    """tag_value keeps JSON source text for non-string values."""

    def test_string_is_unchanged(self) -> None:
        assert tag_value("Main Street") == "Main Street"

    def test_string_is_not_quoted(self) -> None:
        assert tag_value('say "hi"') == 'say "hi"'

    def test_integer(self) -> None:
        assert tag_value(42) == "42"

    def test_decimal_keeps_trailing_zero(self) -> None:
        assert tag_value(Decimal("1.50")) == "1.50"

    def test_booleans_are_json_literals(self) -> None:
        assert tag_value(True) == "true"
        assert tag_value(False) == "false"

    def test_null(self) -> None:
        assert tag_value(None) == "null"

    def test_nested_object_is_compact_json(self) -> None:
        value = {"a": [1, Decimal("2.0"), "x"], "b": None}
        assert tag_value(value) == '{"a":[1,2.0,"x"],"b":null}'

    def test_non_ascii_is_kept(self) -> None:
        assert tag_value(["Zürich"]) == '["Zürich"]'

    def test_decoded_number_keeps_literal(self) -> None:
        assert tag_value(JsonNumber("0.00000001")) == "0.00000001"
        assert tag_value(JsonNumber("1e5")) == "1e5"
        assert tag_value(JsonNumber("-0.0")) == "-0.0"

    def test_nested_decoded_numbers_keep_literal(self) -> None:
        (value,) = iter_values('{"a": [1E+2, 0.10]}')
        assert tag_value(value) == '{"a":[1E+2,0.10]}'


class TestExtractTags:
    """extract_tags reads a Feature's properties member."""

    def test_absent_properties(self) -> None:
        assert extract_tags({"type": "Feature"}) == {}

    def test_null_properties(self) -> None:
        assert extract_tags({"type": "Feature", "properties": None}) == {}

    def test_keys_are_sorted(self) -> None:
        tags = extract_tags({"properties": {"z": "1", "a": "2", "m": "3"}})
        assert list(tags) == ["a", "m", "z"]

    def test_values_are_strings(self) -> None:
        tags = extract_tags({"properties": {"lanes": 2, "oneway": False, "ref": "A1"}})
        assert tags == {"lanes": "2", "oneway": "false", "ref": "A1"}

    def test_small_and_exponent_numbers_not_normalised(self) -> None:
        (feature,) = iter_values('{"properties": {"eps": 0.00000001, "big": 1e5}}')
        assert extract_tags(feature) == {"big": "1e5", "eps": "0.00000001"}

    def test_non_object_properties_rejected(self) -> None:
        with pytest.raises(IllegalDataError, match="Expected an object"):
            extract_tags({"properties": ["not", "a", "map"]})


# ---------------------------------------------------------------------------
# Tests: coordinate extraction
# ---------------------------------------------------------------------------


class TestExtractLatLon:
    """extract_latlon converts one [lon, lat] position."""

    def test_swaps_axes(self) -> None:
        assert extract_latlon([10, 20], "test") == LatLon(lat=20.0, lon=10.0)

    def test_accepts_decimal(self) -> None:
        coor = extract_latlon([Decimal("1.25"), Decimal("-3.5")], "test")
        assert coor == LatLon(-3.5, 1.25)

    def test_rejects_non_array(self) -> None:
        with pytest.raises(IllegalDataError, match="Expected an array"):
            extract_latlon({"lon": 1, "lat": 2}, "test")

    def test_rejects_null_axis(self) -> None:
        with pytest.raises(IllegalDataError, match="Latitude in test must be a number, got null"):
            extract_latlon([1, None], "test")

    def test_rejects_overflowing_number(self) -> None:
        with pytest.raises(IllegalDataError, match="not a finite number"):
            extract_latlon([Decimal("1e400"), 0], "test")


class TestExtractPositions:
    """extract_positions keeps order and duplicates."""

    def test_order_and_duplicates(self) -> None:
        coords = extract_positions([[0, 0], [1, 1], [1, 1]], "ring")
        assert coords == [LatLon(0, 0), LatLon(1, 1), LatLon(1, 1)]

    def test_error_names_index(self) -> None:
        with pytest.raises(IllegalDataError, match=r"ring\[1\]"):
            extract_positions([[0, 0], ["x", 1]], "ring")


# ---------------------------------------------------------------------------
# Tests: value source
# ---------------------------------------------------------------------------


class TestReadText:
    """read_text accepts str, bytes and streams."""

    def test_str(self) -> None:
        assert read_text("{}", "utf-8") == "{}"

    def test_bytes(self) -> None:
        assert read_text(b"{}", "utf-8") == "{}"

    def test_binary_stream(self) -> None:
        assert read_text(io.BytesIO(b"[1]"), "utf-8") == "[1]"

    def test_text_stream(self) -> None:
        assert read_text(io.StringIO("[1]"), "utf-8") == "[1]"

    def test_strips_byte_order_mark(self) -> None:
        assert read_text("\ufeff{}".encode(), "utf-8") == "{}"

    def test_undecodable_bytes(self) -> None:
        with pytest.raises(IllegalDataError, match="not valid utf-8"):
            read_text(b"\xff\xfe\xfa", "utf-8")

    def test_other_encoding(self) -> None:
        assert read_text('{"n": "é"}'.encode("latin-1"), "latin-1") == '{"n": "é"}'

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            read_text(42, "utf-8")  # type: ignore[arg-type]


class TestIterValues:
    """iter_values yields each top-level value."""

    def test_empty_text(self) -> None:
        assert list(iter_values("  \n ")) == []

    def test_concatenated_values(self) -> None:
        assert list(iter_values('{"a": 1} [2]\n"three"')) == [{"a": 1}, [2], "three"]

    def test_floats_decode_as_decimal(self) -> None:
        (value,) = iter_values("[1.10]")
        assert value == [Decimal("1.10")]
        assert str(value[0]) == "1.10"

    def test_values_before_error_are_yielded(self) -> None:
        values = iter_values('{"a": 1} {oops')
        assert next(values) == {"a": 1}
        with pytest.raises(IllegalDataError, match="line 1"):
            next(values)

    def test_infinity_rejected(self) -> None:
        with pytest.raises(IllegalDataError, match="Infinity"):
            list(iter_values("[Infinity]"))

    def test_numbers_decode_with_source_text(self) -> None:
        (value,) = iter_values("[7, 0.00000001]")
        assert value == [7, Decimal("0.00000001")]
        assert [number.text for number in value] == ["7", "0.00000001"]

    def test_integer_beyond_int_digit_limit(self) -> None:
        digits = "1" * 5000
        (value,) = iter_values(f'{{"n": {digits}}}')
        assert value["n"].text == digits
        assert tag_value(value["n"]) == digits
