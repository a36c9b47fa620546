"""interstate - A minimal state pattern: per-state action dispatch with enter/exit hooks."""
from __future__ import annotations

from interstate.config import ON_ENTER_STATE, ON_EXIT_STATE, InterstateConfig
from interstate.machine import Interstate
from interstate.types import (
    Behavior,
    BehaviorMap,
    BehaviorTable,
    BehaviorTableError,
    Callback,
    SnapshotError,
    StateId,
    Value,
    as_behavior,
)

__all__ = [
    "Interstate",
    "InterstateConfig",
    "ON_ENTER_STATE",
    "ON_EXIT_STATE",
    "Callback",
    "Value",
    "Behavior",
    "BehaviorMap",
    "BehaviorTable",
    "StateId",
    "as_behavior",
    "BehaviorTableError",
    "SnapshotError",
]
