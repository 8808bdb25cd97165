"""Application layer - use cases and orchestration."""

from .commands import CreateCuttingPlanCommand, expand_quantities
from .dtos import DEFAULT_PLAN_NAME, PlanRecord
from .factory import ServiceFactory, get_factory, reset_factory

__all__ = [
    "CreateCuttingPlanCommand",
    "DEFAULT_PLAN_NAME",
    "PlanRecord",
    "ServiceFactory",
    "expand_quantities",
    "get_factory",
    "reset_factory",
]
