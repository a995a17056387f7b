# src/logging/context.py - v1
"""Contextual logging support: attach repository, run_id and stage to records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

_repository: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "repository", default=None
)
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)


@dataclass
class LogContext:
    """Snapshot of the current logging context."""

    repository: str | None = None
    run_id: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    return LogContext(
        repository=_repository.get(),
        run_id=_run_id.get(),
        stage=_stage.get(),
    )


def set_run_context(run_id: str, repository: str | None = None) -> None:
    """Set run-level context (called once per analysis run)."""
    _run_id.set(run_id)
    _repository.set(repository)


def set_stage_context(stage: str | None) -> None:
    """Set the analysis stage currently executing (e.g. 'centrality')."""
    _stage.set(stage)


def clear_context() -> None:
    _repository.set(None)
    _run_id.set(None)
    _stage.set(None)
