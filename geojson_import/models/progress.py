"""Progress reporting and cancellation for long imports."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressMonitor(Protocol):
    """Collaborator told about parse progress and asked about cancellation.

    The reader calls ``begin_task`` once, ``worked`` after each top-level
    value and each feature, and ``finish_task`` exactly once whether the
    parse succeeded or not. ``is_cancelled`` is polled between those
    units of work; returning ``True`` aborts the parse.
    """

    @property
    def is_cancelled(self) -> bool: ...

    def begin_task(self, title: str) -> None: ...

    def worked(self, ticks: int = 1) -> None: ...

    def finish_task(self) -> None: ...


class NullProgressMonitor:
    """Monitor used when the caller does not supply one. Never cancels."""

    @property
    def is_cancelled(self) -> bool:
        return False

    def begin_task(self, title: str) -> None:
        pass

    def worked(self, ticks: int = 1) -> None:
        pass

    def finish_task(self) -> None:
        pass
