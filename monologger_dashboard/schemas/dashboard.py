from pydantic import BaseModel, Field
from typing import Annotated, Literal, Union

from .stats import DashboardViewModel


class PendingView(BaseModel):
    """A fetch cycle is in flight; only a loading indicator is shown."""
    status: Literal["pending"] = "pending"


class FailedView(BaseModel):
    """The last fetch cycle failed; only the message is shown."""
    status: Literal["failed"] = "failed"
    message: str


class ReadyView(BaseModel):
    """The last fetch cycle succeeded; the full dashboard is shown."""
    status: Literal["ready"] = "ready"
    dashboard: DashboardViewModel


DashboardView = Annotated[
    Union[ReadyView, FailedView, PendingView],
    Field(discriminator="status"),
]
