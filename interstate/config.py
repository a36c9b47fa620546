"""Machine configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

ON_ENTER_STATE = "onEnterState"
ON_EXIT_STATE = "onExitState"


@dataclass(frozen=True)
class InterstateConfig:
    """Immutable configuration for an :class:`~interstate.Interstate`.

    Attributes:
        enter_action: Action triggered on the new state after a transition
            commits. Receives the transition's extra arguments.
        exit_action: Action triggered on the current state before a
            transition. Receives the previous transition's extra arguments;
            returning exactly ``False`` vetoes the transition.
    """

    enter_action: str = ON_ENTER_STATE
    exit_action: str = ON_EXIT_STATE
