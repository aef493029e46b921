from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union


class StatsModel(BaseModel):
    """Immutable value object; camelCase on the wire, snake_case in Python.

    Payload fields use the Strict* types, so a value of the wrong JSON type
    (a quoted count, a boolean) fails validation instead of being converted.
    Fields the reporting service sends beyond the documented ones are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Reporting service payloads
# =============================================================================

class GlobalStats(StatsModel):
    """Counters for the whole dataset.

    The counters are not cross-checked; the reporting service owns their
    consistency.
    """
    total_messages: StrictInt
    error_count: StrictInt
    message_count: StrictInt
    warning_count: StrictInt
    avg_magnitude: Union[StrictFloat, StrictInt]  # an integral magnitude keeps its int form
    unique_users: StrictInt


class UserSummary(StatsModel):
    """Per-user message totals."""
    user_id: StrictInt
    user_name: Optional[StrictStr] = None
    total_messages: StrictInt
    errors: StrictInt
    last_message: StrictStr  # ISO-8601 timestamp, kept verbatim


class DailyActivity(StatsModel):
    """Message counts for one calendar day."""
    date: StrictStr  # ISO-8601 date, kept verbatim
    messages: StrictInt
    errors: StrictInt
    warnings: StrictInt


class ActivityPoint(DailyActivity):
    """Daily activity with a locale-formatted date for chart labels."""
    display_date: StrictStr


class TopUser(StatsModel):
    """One row of the top-users ranking."""
    user_id: StrictInt
    user_name: Optional[StrictStr] = None
    message_count: StrictInt


# =============================================================================
# View model
# =============================================================================

class DashboardViewModel(StatsModel):
    """Everything the dashboard renders, built from one fetch cycle."""
    global_stats: GlobalStats = Field(alias="global")
    users: List[UserSummary]
    activity: List[ActivityPoint]
    top_users: List[TopUser]
