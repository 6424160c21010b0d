"""GeoJSON reader, as a composable pipeline.

Reads GeoJSON (RFC 7946) and creates map-editing primitives in a
destination store: Points, Polylines, and multipolygon AreaRelations,
tagged with the properties of the Feature they came from.

The parsing pipeline is split into focused stages:
- **_source**: top-level JSON values from a stream, str or bytes
- **_root**: FeatureCollection / Feature / bare geometry routing
- **_geometry**: per-type geometry dispatch, GeometryCollection recursion
- **_factory**: Point/Polyline/AreaRelation creation, ring closure
- **_coordinates**: ``[lon, lat]`` positions to ``LatLon``
- **_tags**: Feature properties to string tags
- **_validation**: required-member checks and reader exceptions

Error handling:
- Malformed documents raise ``IllegalDataError`` and stop the parse.
  Primitives stored before the failure stay in the store; the caller
  must discard it.
- Files that cannot be read raise ``SourceReadError``, retryable when
  the cause is a passing I/O failure.
- Geometry objects of unknown ``type`` are logged and skipped.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from geojson_import.core.config import ReaderConfig
from geojson_import.core.exceptions import GeoJsonImportError
from geojson_import.models.progress import NullProgressMonitor
from geojson_import.models.report import STATUS_FAILED, STATUS_SUCCESS, ImportReport
from geojson_import.models.store import DataSet
from geojson_import.reader._context import ParseContext, ParseStats
from geojson_import.reader._root import parse_document
from geojson_import.reader._source import iter_values, read_text
from geojson_import.reader._tags import extract_tags, tag_value
from geojson_import.reader._validation import IllegalDataError, ParseCancelledError, SourceReadError

if TYPE_CHECKING:
    from typing import IO

    from geojson_import.models.progress import ProgressMonitor
    from geojson_import.models.store import StoreBuilder

    Source = IO[bytes] | IO[str] | bytes | str

logger = logging.getLogger("geojson_import.reader")

TASK_TITLE = "Parsing GeoJSON"

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "IllegalDataError",
    "ParseCancelledError",
    "ParseStats",
    "SourceReadError",
    "extract_tags",
    "import_geojson",
    "parse",
    "parse_data_set",
    "parse_geojson_file",
    "tag_value",
]


def parse(
    source: Source,
    builder: StoreBuilder | None = None,
    monitor: ProgressMonitor | None = None,
    *,
    config: ReaderConfig | None = None,
) -> StoreBuilder:
    """Parse GeoJSON from ``source`` into ``builder``.

    Args:
        source: Readable binary or text stream, or the document as
            ``str``/``bytes``.
        builder: Store receiving the primitives. A new ``DataSet`` when
            omitted.
        monitor: Progress/cancellation collaborator. A
            ``NullProgressMonitor`` when omitted.
        config: Reader settings. ``ReaderConfig()`` defaults when omitted.

    Returns:
        The store the primitives were added to.

    Raises:
        IllegalDataError: If the document is not usable GeoJSON.
        ParseCancelledError: If ``monitor`` reports cancellation.
    """
    context = ParseContext(
        builder=builder if builder is not None else DataSet(),
        monitor=monitor if monitor is not None else NullProgressMonitor(),
        config=config if config is not None else ReaderConfig(),
    )
    _run(context, source)
    return context.builder


def parse_data_set(
    source: Source,
    monitor: ProgressMonitor | None = None,
    *,
    config: ReaderConfig | None = None,
) -> DataSet:
    """Parse GeoJSON from ``source`` into a new ``DataSet``."""
    data_set = DataSet()
    parse(source, data_set, monitor, config=config)
    return data_set


def parse_geojson_file(
    path: Path | str,
    monitor: ProgressMonitor | None = None,
    *,
    config: ReaderConfig | None = None,
) -> DataSet:
    """Parse a GeoJSON file from disk into a new ``DataSet``.

    Raises:
        SourceReadError: If the file cannot be read.
        IllegalDataError: If the file is not usable GeoJSON.
    """
    path = Path(path)
    logger.info("Parsing GeoJSON file: %s", path.name)
    try:
        with path.open("rb") as stream:
            return parse_data_set(stream, monitor, config=config)
    except OSError as exc:
        raise SourceReadError.from_os_error(path.name, exc) from exc


def import_geojson(
    source: Source | Path,
    *,
    source_name: str = "",
    monitor: ProgressMonitor | None = None,
    config: ReaderConfig | None = None,
    correlation_id: str = "",
) -> tuple[DataSet, ImportReport]:
    """Parse GeoJSON and describe the run in an ``ImportReport``.

    Import errors do not propagate: they are logged and recorded in the
    report with ``status="failed"``. The returned data set must then be
    discarded.
    """
    if isinstance(source, Path):
        source_name = source_name or source.name

    data_set = DataSet()
    context = ParseContext(
        builder=data_set,
        monitor=monitor if monitor is not None else NullProgressMonitor(),
        config=config if config is not None else ReaderConfig(),
    )
    report = ImportReport(
        source=source_name,
        correlation_id=correlation_id,
        timestamp=datetime.now(UTC).isoformat(),
    )

    started = time.monotonic()
    try:
        if isinstance(source, Path):
            try:
                payload: Source = source.read_bytes()
            except OSError as exc:
                raise SourceReadError.from_os_error(source.name, exc) from exc
        else:
            payload = source
        _run(context, payload)
    except GeoJsonImportError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        logger.error("GeoJSON import of %s failed: %s", source_name or "<input>", exc)
        report.status = STATUS_FAILED
        report.errors.append(exc.to_error_dict())
    else:
        report.status = STATUS_SUCCESS

    summary = data_set.summary()
    bounds = data_set.bounds
    report.duration_s = time.monotonic() - started
    report.value_count = context.stats.values
    report.feature_count = context.stats.features
    report.unknown_geometry_count = context.stats.unknown_geometries
    report.point_count = summary["points"]
    report.polyline_count = summary["polylines"]
    report.relation_count = summary["relations"]
    report.bounds = list(bounds) if bounds is not None else []
    return data_set, report


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _run(context: ParseContext, source: Source) -> None:
    """Dispatch every top-level value of ``source``."""
    context.monitor.begin_task(TASK_TITLE)
    try:
        text = read_text(source, context.config.encoding)
        for value in iter_values(text):
            context.check_cancelled()
            context.stats.values += 1
            parse_document(context, value)
            context.monitor.worked(1)
    finally:
        context.monitor.finish_task()

    logger.info(
        "Parsed %d top-level value(s), %d feature(s), %d unknown geometry object(s)",
        context.stats.values,
        context.stats.features,
        context.stats.unknown_geometries,
    )
