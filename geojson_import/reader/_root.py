"""Root and feature dispatch.

A top-level value is handled by its ``type``:

- ``FeatureCollection`` → every object in ``features`` is a Feature;
  other array elements are ignored.
- ``Feature`` → its ``geometry`` with its ``properties`` as tags.
- anything else → a bare geometry (including ``GeometryCollection``)
  with no tags.

Top-level values that are not objects are ignored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geojson_import.core import constants
from geojson_import.reader._geometry import parse_geometry
from geojson_import.reader._tags import extract_tags
from geojson_import.reader._validation import as_object, require_array, require_string

if TYPE_CHECKING:
    from geojson_import.reader._context import ParseContext

logger = logging.getLogger("geojson_import.reader")


def parse_document(context: ParseContext, root: object) -> None:
    """Create the primitives for one top-level JSON value.

    Raises:
        IllegalDataError: If a required member is missing or mistyped.
        ParseCancelledError: If the monitor cancels between features.
    """
    if not isinstance(root, dict):
        logger.debug("Ignoring top-level %s value", type(root).__name__)
        return

    match require_string(root, constants.TYPE, "top-level object"):
        case constants.FEATURE_COLLECTION:
            features = require_array(root, constants.FEATURES, constants.FEATURE_COLLECTION)
            for feature in features:
                if isinstance(feature, dict):
                    parse_feature(context, feature)
        case constants.FEATURE:
            parse_feature(context, root)
        case _:
            parse_geometry(context, None, root)


def parse_feature(context: ParseContext, feature: dict[str, object]) -> None:
    """Create the primitives for one Feature, tagged with its properties."""
    context.check_cancelled()
    context.stats.features += 1

    geometry = feature.get(constants.GEOMETRY)
    if geometry is None:
        logger.debug("Feature %d has no geometry", context.stats.features)
    else:
        where = f"'{constants.GEOMETRY}' of a Feature"
        parse_geometry(context, extract_tags(feature), as_object(geometry, where))

    context.monitor.worked(1)
