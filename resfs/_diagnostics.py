"""Diagnostic events emitted while a tree is built.

The builder never raises for an individual bad entry. It reports the entry
to a *sink* (any callable accepting a :class:`DiagnosticEvent`) and moves on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger("resfs")


@dataclass(frozen=True)
class DiagnosticEvent:
    kind: str
    name: str
    directory: str
    message: str
    candidates: tuple[str, ...] = ()
    error: BaseException | None = field(default=None, compare=False)


DiagnosticSink = Callable[[DiagnosticEvent], None]


class LoggingSink:
    """Forward events to a :mod:`logging` logger at WARNING level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log if log is not None else logger

    def __call__(self, event: DiagnosticEvent) -> None:
        self._log.warning(
            "%s: %s (directory %r)", event.kind, event.message, event.directory,
            exc_info=event.error if event.kind == "lookup_error" else None,
        )


class CollectingSink:
    """Keep events in memory; mainly for tests."""

    def __init__(self) -> None:
        self.events: list[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def names(self, kind: str | None = None) -> list[str]:
        return [e.name for e in self.events if kind is None or e.kind == kind]
