import pytest

from monologger_dashboard.schemas.dashboard import FailedView, PendingView, ReadyView
from monologger_dashboard.services.builder import build_view_model
from monologger_dashboard.services.fetcher import RawDashboardData
from monologger_dashboard.services.state import (
    Activated,
    Failed,
    LoadFailed,
    Loaded,
    Pending,
    Ready,
    UNAVAILABLE_MESSAGE,
    initial_state,
    present,
    reduce,
)

from conftest import ACTIVITY, SUMMARY, TOP_USERS, USERS


@pytest.fixture
def view_model():
    return build_view_model(RawDashboardData(SUMMARY, USERS, ACTIVITY, TOP_USERS))


class TestReduce:
    """Load state transitions."""

    def test_initial_state_is_pending(self):
        assert isinstance(initial_state(), Pending)

    def test_pending_to_ready(self, view_model):
        state = reduce(Pending(cycle=1), Loaded(cycle=1, view_model=view_model))
        assert state == Ready(cycle=1, view_model=view_model)

    def test_pending_to_failed(self):
        state = reduce(Pending(cycle=1), LoadFailed(cycle=1))
        assert state == Failed(cycle=1, reason=UNAVAILABLE_MESSAGE)

    @pytest.mark.parametrize("previous", [
        Pending(cycle=1),
        Failed(cycle=1, reason="nope"),
    ])
    def test_activation_always_enters_pending(self, previous):
        assert reduce(previous, Activated(cycle=2)) == Pending(cycle=2)

    def test_activation_drops_ready_view_model(self, view_model):
        state = reduce(Ready(cycle=1, view_model=view_model), Activated(cycle=2))
        assert state == Pending(cycle=2)

    def test_ready_cannot_become_ready_without_pending(self, view_model):
        ready = Ready(cycle=1, view_model=view_model)
        assert reduce(ready, Loaded(cycle=1, view_model=view_model)) is ready
        assert reduce(ready, Loaded(cycle=2, view_model=view_model)) is ready

    def test_stale_completion_ignored(self, view_model):
        pending = Pending(cycle=2)
        assert reduce(pending, Loaded(cycle=1, view_model=view_model)) is pending
        assert reduce(pending, LoadFailed(cycle=1)) is pending

    def test_failed_ignores_late_success(self, view_model):
        failed = Failed(cycle=3, reason="nope")
        assert reduce(failed, Loaded(cycle=3, view_model=view_model)) is failed

    def test_unknown_event_rejected(self):
        with pytest.raises(TypeError):
            reduce(Pending(cycle=1), object())


class TestPresent:
    """Each state renders exactly one kind of view."""

    def test_pending_shows_only_loading(self):
        view = present(Pending(cycle=1))
        assert isinstance(view, PendingView)
        assert view.model_dump() == {"status": "pending"}

    def test_failed_shows_only_message(self):
        view = present(Failed(cycle=1, reason=UNAVAILABLE_MESSAGE))
        assert isinstance(view, FailedView)
        assert view.model_dump() == {"status": "failed", "message": UNAVAILABLE_MESSAGE}

    def test_ready_shows_dashboard(self, view_model):
        view = present(Ready(cycle=1, view_model=view_model))
        assert isinstance(view, ReadyView)
        assert view.dashboard == view_model
