"""Geometry dispatcher.

Routes each geometry object to the factory by its ``type``:

| Type               | Result                                          |
|--------------------|-------------------------------------------------|
| Point              | one Point                                       |
| MultiPoint         | one Point per position                          |
| LineString         | one open-or-closed Polyline (no auto-close)     |
| MultiLineString    | one Polyline per line                           |
| Polygon            | one closed Polyline, or a multipolygon relation |
| MultiPolygon       | the Polygon rule per polygon                    |
| GeometryCollection | recursion, tags inherited                       |

Any other ``type`` is logged and skipped; the parse carries on.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geojson_import.core import constants
from geojson_import.reader._coordinates import extract_latlon
from geojson_import.reader._factory import (
    apply_tags,
    build_way,
    create_multipolygon,
    create_point,
)
from geojson_import.reader._validation import (
    IllegalDataError,
    as_array,
    as_object,
    require_array,
    require_string,
)

if TYPE_CHECKING:
    from geojson_import.models.primitives import Polyline
    from geojson_import.reader._context import ParseContext

logger = logging.getLogger("geojson_import.reader")


def parse_geometry(
    context: ParseContext,
    tags: dict[str, str] | None,
    geometry: dict[str, object],
    *,
    depth: int = 0,
) -> None:
    """Create the primitives for one geometry object.

    Args:
        context: Current parse.
        tags: The enclosing feature's tags, or ``None`` outside a feature.
        geometry: Decoded geometry object.
        depth: Number of GeometryCollections enclosing ``geometry``.

    Raises:
        IllegalDataError: If ``type`` or the coordinate members are
            missing or malformed.
    """
    geometry_type = require_string(geometry, constants.TYPE, "geometry")
    where = f"{geometry_type} {constants.COORDINATES}"

    match geometry_type:
        case constants.POINT:
            coordinates = require_array(geometry, constants.COORDINATES, geometry_type)
            _parse_point(context, tags, coordinates, where)
        case constants.MULTI_POINT:
            coordinates = require_array(geometry, constants.COORDINATES, geometry_type)
            for idx, position in enumerate(coordinates):
                _parse_point(context, tags, position, f"{where}[{idx}]")
        case constants.LINE_STRING:
            coordinates = require_array(geometry, constants.COORDINATES, geometry_type)
            _parse_line_string(context, tags, coordinates, where)
        case constants.MULTI_LINE_STRING:
            coordinates = require_array(geometry, constants.COORDINATES, geometry_type)
            for idx, line in enumerate(coordinates):
                _parse_line_string(context, tags, line, f"{where}[{idx}]")
        case constants.POLYGON:
            coordinates = require_array(geometry, constants.COORDINATES, geometry_type)
            _parse_polygon(context, tags, coordinates, where)
        case constants.MULTI_POLYGON:
            coordinates = require_array(geometry, constants.COORDINATES, geometry_type)
            for idx, polygon in enumerate(coordinates):
                _parse_polygon(context, tags, polygon, f"{where}[{idx}]")
        case constants.GEOMETRY_COLLECTION:
            _parse_geometry_collection(context, tags, geometry, depth=depth + 1)
        case _:
            _parse_unknown(context, geometry_type)


# ---------------------------------------------------------------------------
# Per-type handlers
# ---------------------------------------------------------------------------


def _parse_point(
    context: ParseContext, tags: dict[str, str] | None, position: object, where: str
) -> None:
    point = create_point(context, extract_latlon(position, where))
    apply_tags(point, tags)


def _parse_line_string(
    context: ParseContext, tags: dict[str, str] | None, coordinates: object, where: str
) -> None:
    way = build_way(context, coordinates, auto_close=False, where=where)
    if way is not None:
        apply_tags(way, tags)


def _parse_polygon(
    context: ParseContext, tags: dict[str, str] | None, coordinates: object, where: str
) -> None:
    rings = as_array(coordinates, where)

    if len(rings) == 1:
        way = build_way(context, rings[0], auto_close=True, where=f"{where}[0]")
        if way is not None:
            apply_tags(way, tags)
    elif len(rings) > 1:
        outer = build_way(context, rings[0], auto_close=True, where=f"{where}[0]")
        inners: list[Polyline] = []
        for idx, ring in enumerate(rings[1:], start=1):
            way = build_way(context, ring, auto_close=True, where=f"{where}[{idx}]")
            if way is not None:
                inners.append(way)
        create_multipolygon(context, outer, inners, tags)


def _parse_geometry_collection(
    context: ParseContext,
    tags: dict[str, str] | None,
    collection: dict[str, object],
    *,
    depth: int,
) -> None:
    if depth > context.config.max_nesting_depth:
        msg = (
            f"{constants.GEOMETRY_COLLECTION} nesting exceeds the limit of "
            f"{context.config.max_nesting_depth} level(s)"
        )
        raise IllegalDataError(msg)

    geometries = require_array(collection, constants.GEOMETRIES, constants.GEOMETRY_COLLECTION)
    for idx, member in enumerate(geometries):
        where = f"{constants.GEOMETRY_COLLECTION} {constants.GEOMETRIES}[{idx}]"
        parse_geometry(context, tags, as_object(member, where), depth=depth)


def _parse_unknown(context: ParseContext, geometry_type: str) -> None:
    context.stats.unknown_geometries += 1
    logger.warning("Unknown GeoJSON object found, skipping: type=%r", geometry_type)
