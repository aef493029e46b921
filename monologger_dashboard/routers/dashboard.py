from fastapi import APIRouter, Depends, Request

from ..schemas.dashboard import DashboardView
from ..services.dashboard import DashboardController
from ..services.state import present

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_controller(request: Request) -> DashboardController:
    """Dependency returning the controller created at startup."""
    return request.app.state.dashboard


@router.get("", response_model=DashboardView)
async def get_dashboard(
    controller: DashboardController = Depends(get_dashboard_controller),
):
    """Get what the dashboard should currently show."""
    return present(controller.state)


@router.post("/refresh", response_model=DashboardView)
async def refresh_dashboard(
    controller: DashboardController = Depends(get_dashboard_controller),
):
    """Reload all dashboard data and return the outcome."""
    state = await controller.refresh()
    return present(state)
