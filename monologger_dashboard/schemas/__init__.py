from .stats import (
    GlobalStats,
    UserSummary,
    DailyActivity,
    ActivityPoint,
    TopUser,
    DashboardViewModel,
)
from .dashboard import PendingView, FailedView, ReadyView, DashboardView

__all__ = [
    "GlobalStats",
    "UserSummary",
    "DailyActivity",
    "ActivityPoint",
    "TopUser",
    "DashboardViewModel",
    "PendingView",
    "FailedView",
    "ReadyView",
    "DashboardView",
]
