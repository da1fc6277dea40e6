from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)


class State(Enum):
    """Base enum for states; subclass it to list the states of one lifecycle."""


class Action(Enum):
    """Base enum for actions that move a state machine between states."""


S = TypeVar("S", bound=State)
A = TypeVar("A", bound=Action)


class StateMachine(Generic[S, A]):
    """Table-driven state machine.

    Transitions are a mapping `(from_state, action) -> to_state`. A state with no
    outgoing transition is terminal.

    Example:
        ```python
        class LampState(State):
            OFF = "OFF"
            ON = "ON"
            BROKEN = "BROKEN"

        class LampAction(Action):
            SWITCH_ON = "SWITCH_ON"
            BREAK = "BREAK"

        sm = StateMachine(
            LampState.OFF,
            {
                (LampState.OFF, LampAction.SWITCH_ON): LampState.ON,
                (LampState.ON, LampAction.BREAK): LampState.BROKEN,
            },
        )
        sm.execute_action(LampAction.SWITCH_ON)  # LampState.ON
        sm.is_in_terminal_state()  # False, ON can still BREAK
        ```
    """

    __slots__ = ("_current_state", "_transitions")

    def __init__(self, initial_state: S, transitions: Mapping[tuple[S, A], S]):
        """Initialize the state machine.

        Args:
            initial_state: State the machine starts in.
            transitions: Mapping of `(from_state, action)` to the target state.

        Raises:
            ValueError: If $transitions is empty.
        """
        # Raise: a machine without transitions can never move
        if not transitions:
            raise ValueError("$transitions cannot be empty. At least one transition must be defined.")

        self._current_state = initial_state
        self._transitions = dict(transitions)

    @property
    def current_state(self) -> S:
        return self._current_state

    def can_execute_action(self, action: A) -> bool:
        return (self._current_state, action) in self._transitions

    def list_valid_actions(self) -> list[A]:
        """Actions that have a transition from the current state."""
        return [action for (state, action) in self._transitions if state == self._current_state]

    def execute_action(self, action: A) -> S:
        """Apply $action and move to the target state.

        Returns:
            The new current state.

        Raises:
            ValueError: If $action has no transition from the current state.
        """
        key = (self._current_state, action)

        # Raise: only listed transitions are allowed
        if key not in self._transitions:
            valid_actions = [a.value for a in self.list_valid_actions()]
            raise ValueError(f"Invalid $action '{action.value}' from $_current_state '{self._current_state.value}'. Valid actions are: {valid_actions}")

        previous_state = self._current_state
        self._current_state = self._transitions[key]
        logger.debug(f"Transitioned from {previous_state.value} to {self._current_state.value} on {action.value}")
        return self._current_state

    def is_in_terminal_state(self) -> bool:
        """True when no action can be executed from the current state."""
        return not self.list_valid_actions()
