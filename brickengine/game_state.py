"""Switching between game states, each with its own list of systems."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Mapping, TypeVar

State = TypeVar("State", bound=Hashable)


def _state_label(state: Any) -> str:
    try:
        return str(int(state))
    except (TypeError, ValueError):
        return str(state)


class ResetOnSetStateNotSetError(LookupError):
    """Raised when a state has no reset rules."""

    def __init__(self, state: Any) -> None:
        super().__init__(
            "reset_on_set_state in GameStateManager not correctly set for the upcoming state: "
            + _state_label(state)
        )
        self.state = state


class StateSystemsNotSetError(LookupError):
    """Raised when a state has no systems."""

    def __init__(self, state: Any) -> None:
        super().__init__(
            "state_systems in GameStateManager not correctly set for the upcoming state: "
            + _state_label(state)
        )
        self.state = state


class GameStateManager(Generic[State]):
    """Keeps the current state and swaps to the next one on the following frame.

    ``reset_on_set_state`` maps each state to an object with boolean
    ``reset_on_start`` and ``reset_on_end`` attributes. A state whose integer
    value is 0 counts as "not yet initialised".
    """

    def __init__(self, reset_on_set_state: Mapping[State, Any], begin_state: State) -> None:
        self._reset_on_set_state = dict(reset_on_set_state)
        self._current_state = begin_state
        self._next_state: State | None = None
        self._state_systems: dict[State, list[Any]] = {}

    @property
    def current_state(self) -> State:
        return self._current_state

    def set_state_systems(self, state_systems: Mapping[State, list[Any]]) -> None:
        self._state_systems = dict(state_systems)

    def set_state(self, state: State) -> None:
        """Schedule a switch; it happens on the next call to :meth:`get_systems`."""
        if state not in self._reset_on_set_state:
            raise ResetOnSetStateNotSetError(state)
        if state not in self._state_systems:
            raise StateSystemsNotSetError(state)
        self._next_state = state

    def get_systems(self) -> list[Any]:
        if self._next_state is not None:
            next_state = self._next_state
            # The reset happens only if the current state resets on end
            # and the next state resets on start.
            reset_systems = True
            if int(self._current_state) != 0:
                reset_systems = self._reset_on_set_state[self._current_state].reset_on_end
            if reset_systems:
                reset_systems = self._reset_on_set_state[next_state].reset_on_start
            if reset_systems:
                for system in self._state_systems[next_state]:
                    system.reset()
            self._current_state = next_state
            self._next_state = None
        return self._state_systems[self._current_state]