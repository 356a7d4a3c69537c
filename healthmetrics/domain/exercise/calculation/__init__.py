"""Calculation services for exercises."""

from .work_power_service import WorkPowerService

__all__ = ["WorkPowerService"]
