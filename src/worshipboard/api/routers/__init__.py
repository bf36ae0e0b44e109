"""API routers."""

from worshipboard.api.routers.planning_center import router as planning_center_router

__all__ = ["planning_center_router"]
