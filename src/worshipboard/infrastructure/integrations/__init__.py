"""External integration client implementations."""

from worshipboard.infrastructure.integrations.planning_center_client import (
    PlanningCenterClient,
)
from worshipboard.infrastructure.integrations.planning_center_resources import (
    PlanningCenterResources,
)

__all__ = [
    "PlanningCenterClient",
    "PlanningCenterResources",
]
