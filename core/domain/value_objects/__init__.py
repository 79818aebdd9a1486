"""Domain value objects."""

from .value_objects import EntityID, ExecutionID, Money

__all__ = [
    "EntityID",
    "ExecutionID",
    "Money",
]
