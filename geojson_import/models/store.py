"""Destination stores for imported primitives.

The reader only ever talks to a store through ``StoreBuilder``: a single
``add_primitive`` call per created primitive, made as soon as the
primitive exists. ``DataSet`` is the in-memory implementation returned
by the convenience entry points.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from geojson_import.core.exceptions import ContractError
from geojson_import.models.primitives import AreaRelation, Point, Polyline

if TYPE_CHECKING:
    from collections.abc import Iterator

    from geojson_import.models.primitives import Primitive

logger = logging.getLogger("geojson_import.models.store")


@runtime_checkable
class StoreBuilder(Protocol):
    """Sink that receives every primitive the reader creates."""

    def add_primitive(self, primitive: Primitive) -> None:
        """Take ownership of ``primitive``."""
        ...


class DuplicatePrimitiveError(ContractError):
    """Raised when the same primitive is added to a ``DataSet`` twice."""

    default_stage = "store"
    default_code = "STORE_DUPLICATE_PRIMITIVE"


class DataSet:
    """In-memory store of imported primitives, in insertion order."""

    def __init__(self) -> None:
        self._primitives: dict[int, Primitive] = {}

    def add_primitive(self, primitive: Primitive) -> None:
        """Add ``primitive`` to the data set.

        Raises:
            DuplicatePrimitiveError: If a primitive with the same id is
                already stored.
        """
        if primitive.id in self._primitives:
            msg = f"Primitive {primitive.id} is already in the data set"
            raise DuplicatePrimitiveError(msg)
        self._primitives[primitive.id] = primitive

    def get(self, primitive_id: int) -> Primitive | None:
        """Return the primitive with ``primitive_id``, or ``None``."""
        return self._primitives.get(primitive_id)

    def __contains__(self, primitive: object) -> bool:
        stored = self._primitives.get(getattr(primitive, "id", 0))
        return stored is not None and stored is primitive

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives.values())

    def __len__(self) -> int:
        return len(self._primitives)

    @property
    def points(self) -> list[Point]:
        return [p for p in self._primitives.values() if isinstance(p, Point)]

    @property
    def polylines(self) -> list[Polyline]:
        return [p for p in self._primitives.values() if isinstance(p, Polyline)]

    @property
    def relations(self) -> list[AreaRelation]:
        return [p for p in self._primitives.values() if isinstance(p, AreaRelation)]

    @property
    def bounds(self) -> tuple[float, float, float, float] | None:
        """Bounding box ``(min_lon, min_lat, max_lon, max_lat)`` of all points.

        ``None`` when the data set holds no points.
        """
        points = self.points
        if not points:
            return None
        lons = [p.coor.lon for p in points]
        lats = [p.coor.lat for p in points]
        return (min(lons), min(lats), max(lons), max(lats))

    def summary(self) -> dict[str, int]:
        """Count stored primitives by kind."""
        counts = {
            "points": len(self.points),
            "polylines": len(self.polylines),
            "relations": len(self.relations),
        }
        logger.debug("Data set summary: %s", counts)
        return counts
