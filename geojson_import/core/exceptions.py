"""Unified import exception taxonomy.

Every error raised by the package inherits from ``GeoJsonImportError``
and carries structured context fields so callers can log, report and
decide what to do with a failed import in one consistent way.

Taxonomy categories
-------------------
- ``ValidationError``: malformed or illegal input data.
- ``PermanentError``: the import stopped and will not complete
  (e.g. cancelled by the caller).
- ``ContractError``: a collaborator broke its interface contract.

Errors whose class derives from the base directly (such as a failed file read)
are ``"transient"`` when ``retryable`` is set and ``"permanent"``
otherwise.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and the import report.
"""

from __future__ import annotations


class GeoJsonImportError(Exception):
    """Base exception for all import-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Import stage where the error occurred
            (e.g. ``"parse_geojson"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"GEOJSON_ILLEGAL_DATA"``).
        retryable: Whether repeating the same import could succeed.
        correlation_id: Caller-supplied identifier for the import run.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoJsonImportError):
    """Input data validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(GeoJsonImportError):
    """Unrecoverable failure of the import run. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(GeoJsonImportError):
    """A collaborator (store, monitor) violated its interface. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
