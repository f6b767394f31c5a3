"""API services."""

from .tooltip_service import TooltipService

__all__ = [
    "TooltipService",
]
