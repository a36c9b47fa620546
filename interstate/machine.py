"""Interstate - state-dependent action dispatch with enter/exit hooks."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from interstate.config import InterstateConfig
from interstate.types import (
    BehaviorMap,
    BehaviorTable,
    Callback,
    SnapshotError,
    StateId,
    as_behavior,
    check_table,
)

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


class Interstate:
    """Holds a current state and dispatches actions against its behavior map.

    ``states`` maps state ids to behavior maps, and each behavior map maps
    action names to a :class:`Callback`, a :class:`Value`, or a bare entry
    (callables are invoked, anything else is returned as-is). Callbacks are
    called with the machine as their first argument, so they can trigger
    actions or transition reentrantly::

        switch = Interstate("on", {
            "on": {"toggle": lambda m: m.transition("off")},
            "off": {"toggle": lambda m: m.transition("on")},
        })
        switch.trigger("toggle")  # off
        switch.trigger("toggle")  # on
    """

    def __init__(
        self,
        initial_state: StateId = None,
        states: BehaviorTable | None = None,
        config: InterstateConfig | None = None,
    ) -> None:
        if states is None:
            states = {}
        check_table(states)
        self._states: BehaviorTable = states
        self._state: StateId = initial_state
        self._extra: tuple[Any, ...] = ()
        self._config = config if config is not None else InterstateConfig()

    @property
    def state(self) -> StateId:
        return self._state

    @property
    def extra(self) -> tuple[Any, ...]:
        """Extra arguments captured by the last committed transition."""
        return self._extra

    @property
    def config(self) -> InterstateConfig:
        return self._config

    @property
    def states(self) -> BehaviorTable:
        return self._states

    @states.setter
    def states(self, table: BehaviorTable) -> None:
        self.set_states(table)

    def set_states(self, table: BehaviorTable) -> None:
        """Replace the behavior table. The current state is kept as-is."""
        check_table(table)
        self._states = table
        logger.debug("behavior table replaced (%d states)", len(table))

    def _behaviors(self) -> BehaviorMap | None:
        try:
            behaviors = self._states.get(self._state)
        except TypeError:
            # Unhashable state ids can never have a table entry.
            return None
        return behaviors if isinstance(behaviors, Mapping) else None

    def trigger(self, action: str, *args: Any) -> Any:
        """Dispatch ``action`` against the current state.

        Returns None when the current state has no behavior map or the map
        has no entry for ``action``.
        """
        behaviors = self._behaviors()
        if not behaviors or action not in behaviors:
            return None
        behavior = as_behavior(behaviors[action])
        if isinstance(behavior, Callback):
            return behavior(self, *args)
        return behavior.value

    def transition(self, new_state: StateId, *extra: Any) -> Any:
        """Move to ``new_state``, firing the exit and enter hooks.

        The exit hook receives the extra arguments of the previous
        transition. If it returns exactly ``False`` the transition is
        aborted and ``False`` is returned. Otherwise the enter hook's
        result is returned.
        """
        old_state = self._state
        if self.trigger(self._config.exit_action, *self._extra) is False:
            logger.debug("transition %r -> %r vetoed", old_state, new_state)
            return False

        self._state = new_state
        self._extra = extra
        logger.debug("transition %r -> %r", old_state, new_state)

        return self.trigger(self._config.enter_action, *extra)

    def has(self, action: str) -> bool:
        """Check if the current state defines ``action``."""
        behaviors = self._behaviors()
        return bool(behaviors) and action in behaviors

    def actions(self) -> list[str]:
        """List action names defined on the current state."""
        behaviors = self._behaviors()
        return list(behaviors) if behaviors else []

    def snapshot(self) -> dict[str, Any]:
        """Capture current state and extra arguments. The table is not included.

        The result survives a JSON round trip when the state and extra
        arguments are JSON values. Tuple state ids come back as lists and
        are turned back into tuples by :meth:`restore`.
        """
        return {
            "version": _SNAPSHOT_VERSION,
            "state": self._state,
            "extra": list(self._extra),
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Reinstate a snapshot without firing any hooks."""
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        missing = [key for key in ("state", "extra") if key not in data]
        if missing:
            raise SnapshotError(f"Snapshot missing fields: {', '.join(missing)}")

        try:
            extra = tuple(data["extra"])
        except TypeError as exc:
            raise SnapshotError(
                f"Snapshot extra must be a sequence, got {type(data['extra']).__name__}"
            ) from exc

        self._state = _freeze(data["state"])
        self._extra = extra

    def __repr__(self) -> str:
        return f"Interstate(state={self._state!r}, extra={self._extra!r})"


def _freeze(value: Any) -> Any:
    """Convert JSON lists back to tuples so composite state ids stay hashable."""
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value
