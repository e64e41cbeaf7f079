"""
Per-session listing views.

A view remembers the operator's current selection and the last listing
committed for it. Each refresh takes a generation number when it is issued;
a response whose generation has been superseded is dropped instead of
overwriting newer state.
"""

import logging
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListingView(Generic[T]):
    """Selection plus the latest listing fetched for it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.selection: tuple[Any, ...] | None = None
        self.generation = 0
        self.listing: T | None = None

    def select(self, *selection: Any) -> int:
        """Record a new selection and return the generation of its request."""
        self.generation += 1
        if selection != self.selection:
            self.listing = None
        self.selection = selection
        return self.generation

    def commit(self, generation: int, listing: T) -> bool:
        """Store *listing* if it answers the newest request; report whether it did."""
        if generation != self.generation:
            logger.debug(
                f"Discarding stale {self.name} listing "
                f"(generation {generation}, current {self.generation})"
            )
            return False
        self.listing = listing
        return True

    def reset(self) -> None:
        self.selection = None
        self.listing = None
        self.generation += 1
