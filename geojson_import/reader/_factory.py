"""Primitive factory and ring builder.

Every primitive is handed to the store the moment it is created, before
any tags are applied and before it is returned to the dispatcher.

Ring closure (``build_way``) for a ring of more than one position:

1. First and last positions equal → the last position does not get a
   Point of its own; the polyline ends on the first Point object.
2. Otherwise, with ``auto_close`` → the first Point is appended.
3. Otherwise the polyline stays open.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geojson_import.core.constants import MULTIPOLYGON, ROLE_INNER, ROLE_OUTER, TYPE
from geojson_import.models.primitives import AreaRelation, Point, Polyline, RelationMember
from geojson_import.reader._coordinates import extract_positions

if TYPE_CHECKING:
    from geojson_import.models.primitives import LatLon
    from geojson_import.reader._context import ParseContext

logger = logging.getLogger("geojson_import.reader")


def create_point(context: ParseContext, coor: LatLon) -> Point:
    """Create a Point at ``coor`` and add it to the store."""
    point = Point(coor)
    context.builder.add_primitive(point)
    return point


def build_way(
    context: ParseContext, raw_ring: object, *, auto_close: bool, where: str
) -> Polyline | None:
    """Build a Polyline from a coordinate array.

    All positions are validated before the first Point is created.

    Returns:
        The stored Polyline, or ``None`` for an empty array.

    Raises:
        IllegalDataError: If the array or any position is malformed.
    """
    positions = extract_positions(raw_ring, where)
    if not positions:
        return None

    closing = len(positions) > 1 and positions[0] == positions[-1]
    if closing:
        positions = positions[:-1]

    nodes = [create_point(context, coor) for coor in positions]
    if closing or (auto_close and len(nodes) > 1):
        nodes.append(nodes[0])

    way = Polyline(nodes)
    context.builder.add_primitive(way)
    return way


def create_multipolygon(
    context: ParseContext,
    outer: Polyline | None,
    inners: list[Polyline],
    tags: dict[str, str] | None,
) -> AreaRelation:
    """Create a ``type=multipolygon`` relation over already stored rings.

    The feature's tags go on the relation; ``type=multipolygon`` wins
    over a ``type`` property.
    """
    members: list[RelationMember] = []
    if outer is not None:
        members.append(RelationMember(ROLE_OUTER, outer))
    members.extend(RelationMember(ROLE_INNER, way) for way in inners)

    relation_tags = dict(tags or {})
    if relation_tags.get(TYPE, MULTIPOLYGON) != MULTIPOLYGON:
        logger.debug(
            "Replacing feature property type=%r with type=%s on area relation",
            relation_tags[TYPE],
            MULTIPOLYGON,
        )
    relation_tags[TYPE] = MULTIPOLYGON

    relation = AreaRelation(members)
    context.builder.add_primitive(relation)
    relation.tags.update(sorted(relation_tags.items()))
    return relation


def apply_tags(primitive: Point | Polyline, tags: dict[str, str] | None) -> None:
    """Give ``primitive`` its own copy of the feature's tags."""
    if tags:
        primitive.tags.update(tags)
