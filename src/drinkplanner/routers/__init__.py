"""API routers for the drinkplanner application."""

from drinkplanner.routers.measurements import router as measurements_router

__all__ = [
    "measurements_router",
]
