"""Pydantic record describing one import run.

The report is the audit trail of an import: what was read, what was
created, what was skipped, and whether the resulting data set can be
trusted. A report with ``status == "failed"`` means the data set that
came with it must be discarded.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Schema version for forward compatibility
SCHEMA_VERSION = "geojson-import-report-v1"

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


class ImportReport(BaseModel):
    """Summary of a single GeoJSON import.

    Attributes:
        schema_version: Report schema identifier.
        source: Name of the imported document (file name or caller label).
        correlation_id: Caller-supplied identifier for the run.
        status: ``"pending"``, ``"success"`` or ``"failed"``.
        value_count: Top-level JSON values read from the source.
        feature_count: Features processed (inside collections or bare).
        point_count: Points stored.
        polyline_count: Polylines stored.
        relation_count: Multipolygon relations stored.
        unknown_geometry_count: Geometry objects skipped for an
            unrecognised ``type``.
        bounds: ``[min_lon, min_lat, max_lon, max_lat]`` of the stored
            points, empty when there are none.
        timestamp: When the import started (ISO 8601, UTC).
        duration_s: Wall-clock duration of the parse in seconds.
        errors: Structured error payloads (``to_error_dict()`` output).
    """

    schema_version: str = SCHEMA_VERSION
    source: str = ""
    correlation_id: str = ""
    status: str = "pending"
    value_count: int = Field(default=0, ge=0)
    feature_count: int = Field(default=0, ge=0)
    point_count: int = Field(default=0, ge=0)
    polyline_count: int = Field(default=0, ge=0)
    relation_count: int = Field(default=0, ge=0)
    unknown_geometry_count: int = Field(default=0, ge=0)
    bounds: list[float] = Field(default_factory=list)
    timestamp: str = ""
    duration_s: float = Field(default=0.0, ge=0.0)
    errors: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def primitive_count(self) -> int:
        """Total primitives stored by the import."""
        return self.point_count + self.polyline_count + self.relation_count

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCESS
