"""Domain models for the card fusion game."""

from .catalog import Catalog
from .combination import Combination, CombinationOutcome, OutcomeStatus
from .element import Element, ElementId, Recipe, is_valid_element_id, pair_key
from .selection import SelectionSlots, SelectionState
from .unlock_set import UnlockSet

__all__ = [
    "Catalog",
    "Combination",
    "CombinationOutcome",
    "OutcomeStatus",
    "Element",
    "ElementId",
    "Recipe",
    "is_valid_element_id",
    "pair_key",
    "SelectionSlots",
    "SelectionState",
    "UnlockSet",
]
