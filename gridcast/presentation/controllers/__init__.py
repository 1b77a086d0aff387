"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers validate input, call one use case and
translate domain errors into HTTP responses.
"""

from .forecast_controller import router as forecast_router
from .system_controller import router as system_router

__all__ = ["forecast_router", "system_router"]
