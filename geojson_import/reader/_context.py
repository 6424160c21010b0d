"""Per-parse state shared by the dispatchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geojson_import.reader._validation import ParseCancelledError

if TYPE_CHECKING:
    from geojson_import.core.config import ReaderConfig
    from geojson_import.models.progress import ProgressMonitor
    from geojson_import.models.store import StoreBuilder


@dataclass(slots=True)
class ParseStats:
    """Counters collected while a document is parsed."""

    values: int = 0
    features: int = 0
    unknown_geometries: int = 0


@dataclass(slots=True)
class ParseContext:
    """Collaborators and counters for one parse.

    Attributes:
        builder: Store receiving every created primitive.
        monitor: Progress/cancellation collaborator.
        config: Reader limits and decoding settings.
        stats: Counters updated as the parse proceeds.
    """

    builder: StoreBuilder
    monitor: ProgressMonitor
    config: ReaderConfig
    stats: ParseStats = field(default_factory=ParseStats)

    def check_cancelled(self) -> None:
        """Raise ``ParseCancelledError`` if the monitor asks to stop."""
        if self.monitor.is_cancelled:
            msg = (
                f"GeoJSON parse cancelled after {self.stats.values} top-level "
                f"value(s) and {self.stats.features} feature(s)"
            )
            raise ParseCancelledError(msg)
