from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from monet.domain.errors import ConversionError
from monet.utils.state_machine import Action, State, StateMachine

if TYPE_CHECKING:
    from monet.domain.monetary.money import Money
    from monet.domain.operation.operation import DeferredOperation

logger = logging.getLogger(__name__)


class ResolutionState(State):
    """Lifecycle of resolving a deferred operation against a rate table."""

    UNRESOLVED = "UNRESOLVED"  # Operation requested, nothing computed yet
    RESOLVED = "RESOLVED"  # Terminal; final Money is available
    FAILED = "FAILED"  # Terminal; carries the error, no partial Money


class ResolutionAction(Action):
    SUCCEED = "SUCCEED"
    FAIL = "FAIL"


def create_resolution_state_machine() -> StateMachine[ResolutionState, ResolutionAction]:
    """Create a state machine `UNRESOLVED -> RESOLVED | FAILED`."""
    transitions = {
        (ResolutionState.UNRESOLVED, ResolutionAction.SUCCEED): ResolutionState.RESOLVED,
        (ResolutionState.UNRESOLVED, ResolutionAction.FAIL): ResolutionState.FAILED,
    }
    return StateMachine(ResolutionState.UNRESOLVED, transitions)


class Resolution:
    """Outcome of `DeferredOperation.resolve`.

    Holds either the resulting Money (state RESOLVED) or the ConversionError that
    stopped the whole expression (state FAILED). Never both.
    """

    __slots__ = ("_operation", "_state_machine", "_money", "_error")

    def __init__(self, operation: DeferredOperation | Money):
        self._operation = operation
        self._state_machine = create_resolution_state_machine()
        self._money: Money | None = None
        self._error: ConversionError | None = None

    # region Transitions

    def succeed(self, money: Money) -> None:
        """Record the final Money.

        Raises:
            ValueError: If this resolution is already RESOLVED or FAILED.
        """
        self._state_machine.execute_action(ResolutionAction.SUCCEED)
        self._money = money

    def fail(self, error: ConversionError) -> None:
        """Record the error that aborted the operation.

        Raises:
            ValueError: If this resolution is already RESOLVED or FAILED.
        """
        self._state_machine.execute_action(ResolutionAction.FAIL)
        self._error = error
        logger.debug(f"Resolution failed with {type(error).__name__}: {error}")

    # endregion

    @property
    def operation(self) -> DeferredOperation | Money:
        return self._operation

    @property
    def state(self) -> ResolutionState:
        return self._state_machine.current_state

    @property
    def is_resolved(self) -> bool:
        return self.state == ResolutionState.RESOLVED

    @property
    def is_failed(self) -> bool:
        return self.state == ResolutionState.FAILED

    @property
    def money(self) -> Money | None:
        """Final Money when RESOLVED, otherwise None."""
        return self._money

    @property
    def error(self) -> ConversionError | None:
        """The error when FAILED, otherwise None."""
        return self._error

    def unwrap(self) -> Money:
        """Return the Money or raise the recorded error.

        Raises:
            ConversionError: The error recorded when FAILED.
            ValueError: If the resolution is still UNRESOLVED.
        """
        if self._error is not None:
            raise self._error
        if self._money is None:
            raise ValueError(f"Cannot call `unwrap` because $state is {self.state.value}")
        return self._money

    def __repr__(self) -> str:
        outcome = self._money if self._money is not None else self._error
        return f"{self.__class__.__name__}({self.state.value}, {outcome!r})"
