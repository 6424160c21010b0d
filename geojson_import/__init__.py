"""GeoJSON import into map-editing primitives.

Reads GeoJSON (RFC 7946) documents and builds the equivalent graph of
points, polylines and multipolygon relations, with each Feature's
properties attached as string tags.
"""

__version__ = "0.1.0"
