"""Data models and collaborator interfaces.

Defines the structures produced and consumed by the reader:
- Point, Polyline, AreaRelation: imported map-editing primitives
- StoreBuilder, DataSet: destination store interface and implementation
- ProgressMonitor, NullProgressMonitor: progress/cancellation collaborator
- ImportReport: per-import audit record
"""

from geojson_import.models.primitives import (
    AreaRelation,
    LatLon,
    Point,
    Polyline,
    Primitive,
    RelationMember,
)
from geojson_import.models.progress import NullProgressMonitor, ProgressMonitor
from geojson_import.models.report import ImportReport
from geojson_import.models.store import DataSet, DuplicatePrimitiveError, StoreBuilder

__all__ = [
    "AreaRelation",
    "DataSet",
    "DuplicatePrimitiveError",
    "ImportReport",
    "LatLon",
    "NullProgressMonitor",
    "Point",
    "Polyline",
    "Primitive",
    "ProgressMonitor",
    "RelationMember",
    "StoreBuilder",
]
