"""Error taxonomy for the card fusion game."""

from typing import Any


class CardFusionError(Exception):
    """Base class for every error raised by the game core."""


class LoadError(CardFusionError):
    """Catalog data is malformed or violates a catalog invariant."""


class InvalidSelection(CardFusionError):
    """Selected element is locked or does not exist."""

    def __init__(self, element_id: Any, reason: str = "element is not unlocked"):
        self.element_id = element_id
        self.reason = reason
        super().__init__(f"Cannot select {element_id!r}: {reason}")


class SlotsFull(CardFusionError):
    """Both selection slots are occupied."""

    def __init__(self):
        super().__init__("Slots full. Click a slot to remove card.")


class InvalidSlotIndex(CardFusionError):
    """Slot index outside of 1..capacity."""

    def __init__(self, index: Any, capacity: int = 2):
        self.index = index
        self.capacity = capacity
        super().__init__(f"Slot index must be between 1 and {capacity}, got {index!r}")


class IncompleteSelection(CardFusionError):
    """Combine attempted with fewer than two filled slots."""

    def __init__(self, filled: int = 0):
        self.filled = filled
        super().__init__("Select two cards first!")
