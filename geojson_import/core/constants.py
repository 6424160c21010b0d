"""Shared reader constants, kept in one place.

Centralises GeoJSON member names, geometry type names and multipolygon
roles so the dispatchers never spell a magic string twice.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# GeoJSON member names (RFC 7946)
# ---------------------------------------------------------------------------

TYPE = "type"
COORDINATES = "coordinates"
FEATURES = "features"
GEOMETRY = "geometry"
GEOMETRIES = "geometries"
PROPERTIES = "properties"

# ---------------------------------------------------------------------------
# Object type names
# ---------------------------------------------------------------------------

FEATURE_COLLECTION = "FeatureCollection"
FEATURE = "Feature"

POINT = "Point"
MULTI_POINT = "MultiPoint"
LINE_STRING = "LineString"
MULTI_LINE_STRING = "MultiLineString"
POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"
GEOMETRY_COLLECTION = "GeometryCollection"

# ---------------------------------------------------------------------------
# Multipolygon relations
# ---------------------------------------------------------------------------

MULTIPOLYGON = "multipolygon"
"""Value of the ``type`` tag carried by every area relation."""

ROLE_OUTER = "outer"
ROLE_INNER = "inner"

# ---------------------------------------------------------------------------
# Reader defaults
# ---------------------------------------------------------------------------

DEFAULT_ENCODING: str = "utf-8"
"""Codec used to decode byte input."""

DEFAULT_MAX_NESTING_DEPTH: int = 32
"""Maximum accepted GeometryCollection nesting."""

PARSE_STAGE = "parse_geojson"

READ_STAGE = "read_source"
