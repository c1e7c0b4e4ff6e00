"""Errors raised while planning a delivery route."""

from __future__ import annotations


class RoutePlanningError(ValueError):
    """Base class for caller-input problems rejected by the route planner."""


class MissingCoordinate(RoutePlanningError):
    """A stop reached the planner without a resolved location."""

    def __init__(self, stop_id: str) -> None:
        super().__init__(f"Stop '{stop_id}' has no resolved coordinate.")
        self.stop_id = stop_id


class DuplicateStop(RoutePlanningError):
    """Two stops in one planning request share an identifier."""

    def __init__(self, stop_id: str) -> None:
        super().__init__(f"Stop '{stop_id}' appears more than once in the request.")
        self.stop_id = stop_id


class InvalidConfiguration(RoutePlanningError):
    """Planning options are out of range or name an unknown strategy."""


class UnknownDepot(RoutePlanningError):
    """A depot preset code could not be resolved."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Depot '{code}' is not a known depot preset.")
        self.code = code
