"""Route group exports."""

from . import bins, health, reports, routes

__all__ = ["bins", "routes", "health", "reports"]
