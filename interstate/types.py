"""Shared type aliases, behavior variants, and errors for interstate."""
from __future__ import annotations

from collections.abc import Hashable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from interstate.machine import Interstate

StateId = Hashable
CallbackFn = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class Callback:
    """Behavior invoked as ``fn(machine, *args)``; its result is returned."""

    fn: CallbackFn

    def __call__(self, machine: Interstate, *args: Any) -> Any:
        return self.fn(machine, *args)


@dataclass(frozen=True, slots=True)
class Value:
    """Behavior returned verbatim. Never invoked, even if ``value`` is callable."""

    value: Any


Behavior = Callback | Value
BehaviorMap = Mapping[str, Any]
BehaviorTable = MutableMapping[StateId, BehaviorMap]


def as_behavior(entry: Any) -> Behavior:
    """Classify a behavior map entry. Tagged entries pass through unchanged."""
    if isinstance(entry, (Callback, Value)):
        return entry
    if callable(entry):
        return Callback(entry)
    return Value(entry)


class BehaviorTableError(TypeError):
    """Raised when a behavior table is not a mapping."""

    def __init__(self, table: Any) -> None:
        self.table = table
        super().__init__(
            f"Behavior table must be a mapping, got {type(table).__name__}"
        )


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, missing fields)."""


def check_table(table: Any) -> None:
    if not isinstance(table, Mapping):
        raise BehaviorTableError(table)
