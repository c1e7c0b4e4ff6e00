"""Route group exports."""

from . import depots, health, routes

__all__ = ["routes", "health", "depots"]
