"""Map-editing primitives built from GeoJSON geometry.

Three kinds of primitive come out of an import:

- ``Point``: a single position with tags.
- ``Polyline``: an ordered list of ``Point`` references. Closed
  polylines end with the *same* ``Point`` object they start with.
- ``AreaRelation``: a ``type=multipolygon`` relation whose members are
  outer and inner ``Polyline`` rings.

Primitives compare by identity, never by value: two points at the same
position are still two points. Each primitive receives a negative,
process-unique ``id`` when it is created, the usual convention for new
map data that has never been uploaded anywhere.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry

_id_sequence = itertools.count(1)


def next_primitive_id() -> int:
    """Return the next unused primitive id (negative, strictly decreasing)."""
    return -next(_id_sequence)


class LatLon(NamedTuple):
    """A WGS 84 position, latitude first."""

    lat: float
    lon: float


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A single position.

    Attributes:
        coor: Position of the point. Never changes after creation.
        tags: Key/value attributes, filled once right after creation.
        id: Identity assigned at creation.
    """

    coor: LatLon
    tags: dict[str, str] = field(default_factory=dict)
    id: int = field(default_factory=next_primitive_id)

    @property
    def lat(self) -> float:
        return self.coor.lat

    @property
    def lon(self) -> float:
        return self.coor.lon

    def to_shapely(self) -> BaseGeometry:
        """Return the position as a shapely ``Point`` in ``(lon, lat)`` order."""
        from shapely.geometry import Point as ShapelyPoint

        return ShapelyPoint(self.coor.lon, self.coor.lat)


@dataclass(frozen=True, slots=True, eq=False)
class Polyline:
    """An ordered sequence of shared ``Point`` references.

    Attributes:
        nodes: Point references in drawing order. A closed polyline's
            last entry is the same object as its first.
        tags: Key/value attributes, filled once right after creation.
        id: Identity assigned at creation.
    """

    nodes: list[Point] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)
    id: int = field(default_factory=next_primitive_id)

    @property
    def is_closed(self) -> bool:
        """Whether the polyline ends on the point object it starts with."""
        return len(self.nodes) > 1 and self.nodes[0] is self.nodes[-1]

    @property
    def distinct_nodes(self) -> list[Point]:
        """Referenced points with repeated references removed, in order."""
        seen: set[int] = set()
        distinct: list[Point] = []
        for node in self.nodes:
            if id(node) not in seen:
                seen.add(id(node))
                distinct.append(node)
        return distinct

    def lonlat_coords(self) -> list[tuple[float, float]]:
        """Return the node positions as ``(lon, lat)`` tuples."""
        return [(node.coor.lon, node.coor.lat) for node in self.nodes]

    def to_shapely(self) -> BaseGeometry:
        """Return the polyline as a shapely geometry.

        Empty polylines become an empty ``LineString`` and single-node
        polylines a ``Point``, since a line needs two positions.
        """
        from shapely.geometry import LineString
        from shapely.geometry import Point as ShapelyPoint

        coords = self.lonlat_coords()
        if len(coords) == 1:
            return ShapelyPoint(coords[0])
        return LineString(coords)


@dataclass(frozen=True, slots=True)
class RelationMember:
    """A role-annotated reference from a relation to one of its ways."""

    role: str
    way: Polyline


@dataclass(frozen=True, slots=True, eq=False)
class AreaRelation:
    """A multipolygon assembled from outer and inner rings.

    Attributes:
        members: Ordered ``(role, way)`` members; ``"outer"`` first.
        tags: Always includes ``type=multipolygon``.
        id: Identity assigned at creation.
    """

    members: list[RelationMember] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)
    id: int = field(default_factory=next_primitive_id)

    def ways_with_role(self, role: str) -> list[Polyline]:
        """Return the member ways carrying ``role``, in member order."""
        return [member.way for member in self.members if member.role == role]

    def to_shapely(self) -> BaseGeometry:
        """Return the area as a shapely ``Polygon`` or ``MultiPolygon``.

        With a single outer ring every inner ring becomes a hole of it.
        With several outer rings each outer ring becomes its own polygon
        and holes are assigned to the outer ring that contains them.

        Raises:
            ValueError: If a ring has too few positions to form a polygon.
        """
        from shapely.geometry import MultiPolygon, Polygon

        outers = [way.lonlat_coords() for way in self.ways_with_role("outer")]
        inners = [way.lonlat_coords() for way in self.ways_with_role("inner")]

        if not outers:
            return Polygon()
        if len(outers) == 1:
            return Polygon(outers[0], inners)

        shells = [Polygon(ring) for ring in outers]
        parts = []
        for shell in shells:
            holes = [ring for ring in inners if shell.contains(Polygon(ring))]
            parts.append(Polygon(shell.exterior.coords, holes))
        return MultiPolygon(parts)


Primitive = Point | Polyline | AreaRelation
"""Any primitive an import can produce."""
