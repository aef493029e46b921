"""
View Model Builder - turns raw reporting payloads into a DashboardViewModel.

Pure: the only transformation is the display date added to each activity
point. Everything else passes through in the order it was received.
"""

import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from ..schemas.stats import (
    ActivityPoint,
    DailyActivity,
    DashboardViewModel,
    GlobalStats,
    TopUser,
    UserSummary,
)
from .errors import DecodeError
from .fetcher import RawDashboardData
from .formatting import DateFormatter, FALLBACK_DISPLAY, format_display_date

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(List[UserSummary])
_activity_adapter = TypeAdapter(List[DailyActivity])
_top_users_adapter = TypeAdapter(List[TopUser])


def _display_date(format_date: DateFormatter, value: str) -> str:
    """Apply the formatter, falling back to the raw value if it misbehaves."""
    try:
        display = format_date(value)
    except Exception as e:
        logger.warning(f"Date formatter failed for {value!r}: {e}")
        display = None
    return display or value or FALLBACK_DISPLAY


def build_view_model(
    raw: RawDashboardData,
    format_date: DateFormatter = format_display_date,
) -> DashboardViewModel:
    """Build the dashboard view model from one fetch.

    Args:
        raw: Decoded bodies of the four reporting endpoints
        format_date: Renders an activity date for display

    Returns:
        DashboardViewModel

    Raises:
        DecodeError: If a payload does not have the expected structure
    """
    try:
        global_stats = GlobalStats.model_validate(raw.summary)
        users = _users_adapter.validate_python(raw.users)
        daily = _activity_adapter.validate_python(raw.activity)
        top_users = _top_users_adapter.validate_python(raw.top_users)
    except ValidationError as e:
        raise DecodeError(f"Unexpected dashboard payload shape: {e}") from e

    activity = [
        ActivityPoint(
            **day.model_dump(),
            display_date=_display_date(format_date, day.date),
        )
        for day in daily
    ]

    return DashboardViewModel(
        global_stats=global_stats,
        users=users,
        activity=activity,
        top_users=top_users,
    )
