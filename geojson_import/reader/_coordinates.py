"""Coordinate extraction.

GeoJSON positions are ``[longitude, latitude, (altitude)]``. The
extractor swaps them into ``LatLon(lat, lon)`` and drops any altitude.
Numbers arrive as ``JsonNumber`` (a ``decimal.Decimal``) from the decoder.
"""

from __future__ import annotations

import math
from decimal import Decimal

from geojson_import.models.primitives import LatLon
from geojson_import.reader._validation import IllegalDataError, as_array, json_type_name


def _to_float(value: object, axis: str, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        msg = f"{axis.capitalize()} in {where} must be a number, got {json_type_name(value)}"
        raise IllegalDataError(msg)
    number = float(value)
    if not math.isfinite(number):
        msg = f"{axis.capitalize()} {value} in {where} is not a finite number"
        raise IllegalDataError(msg)
    return number


def extract_latlon(raw: object, where: str) -> LatLon:
    """Convert one ``[lon, lat, ...]`` position to ``LatLon``.

    Raises:
        IllegalDataError: If the position is not an array of at least two
            finite numbers.
    """
    position = as_array(raw, where)
    if len(position) < 2:
        msg = f"Position in {where} needs at least 2 numbers, got {len(position)}"
        raise IllegalDataError(msg)
    lon = _to_float(position[0], "longitude", where)
    lat = _to_float(position[1], "latitude", where)
    return LatLon(lat, lon)


def extract_positions(raw: object, where: str) -> list[LatLon]:
    """Convert an array of positions, keeping order and duplicates."""
    positions = as_array(raw, where)
    return [extract_latlon(p, f"{where}[{idx}]") for idx, p in enumerate(positions)]
