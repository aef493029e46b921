"""
Load State - lifecycle of dashboard fetch cycles as a pure reducer.

Every state remembers the cycle that produced it. Completion events from any
cycle other than the one currently pending are stale and ignored, so the
last cycle to start is always the one that gets rendered.
"""

from dataclasses import dataclass
from typing import Union

from ..schemas.dashboard import DashboardView, FailedView, PendingView, ReadyView
from ..schemas.stats import DashboardViewModel

UNAVAILABLE_MESSAGE = (
    "Could not load dashboard data. Check that the reporting service is reachable."
)


# =============================================================================
# States
# =============================================================================

@dataclass(frozen=True)
class Pending:
    cycle: int


@dataclass(frozen=True)
class Ready:
    cycle: int
    view_model: DashboardViewModel


@dataclass(frozen=True)
class Failed:
    cycle: int
    reason: str


LoadState = Union[Pending, Ready, Failed]


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class Activated:
    """A new fetch cycle started."""
    cycle: int


@dataclass(frozen=True)
class Loaded:
    """A fetch cycle produced a view model."""
    cycle: int
    view_model: DashboardViewModel


@dataclass(frozen=True)
class LoadFailed:
    """A fetch cycle could not produce a view model."""
    cycle: int
    reason: str = UNAVAILABLE_MESSAGE


LoadEvent = Union[Activated, Loaded, LoadFailed]


def initial_state() -> LoadState:
    """State of a dashboard that has not been activated yet."""
    return Pending(cycle=0)


def reduce(state: LoadState, event: LoadEvent) -> LoadState:
    """Apply an event to a state.

    Activation always enters Pending, dropping whatever was shown before.
    Completion only applies to the cycle that is currently pending; any
    other completion returns the state unchanged.
    """
    if isinstance(event, Activated):
        return Pending(cycle=event.cycle)
    if not isinstance(event, (Loaded, LoadFailed)):
        raise TypeError(f"Unknown load event: {event!r}")

    if not isinstance(state, Pending) or state.cycle != event.cycle:
        return state

    if isinstance(event, Loaded):
        return Ready(cycle=event.cycle, view_model=event.view_model)
    return Failed(cycle=event.cycle, reason=event.reason)


def present(state: LoadState) -> DashboardView:
    """What the presentation layer may show for a state."""
    if isinstance(state, Ready):
        return ReadyView(dashboard=state.view_model)
    if isinstance(state, Failed):
        return FailedView(message=state.reason)
    return PendingView()
