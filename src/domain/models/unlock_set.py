"""Domain model for the player's unlocked elements."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List

from .catalog import Catalog
from .element import ElementId


@dataclass
class UnlockSet:
    """
    Domain model representing the elements a player currently owns.

    Grows monotonically: ids are only ever added. Insertion order is kept so
    views can list elements in the order they were unlocked.
    """

    _ids: Dict[ElementId, None] = field(default_factory=dict)

    @classmethod
    def seeded_from(cls, catalog: Catalog) -> "UnlockSet":
        """Create an unlock set holding exactly the catalog's tier 0 elements."""
        unlock_set = cls()
        for element in catalog.base_elements():
            unlock_set.add(element.element_id)
        return unlock_set

    def contains(self, element_id: ElementId) -> bool:
        """Check if an element is unlocked."""
        return element_id in self._ids

    def add(self, element_id: ElementId) -> bool:
        """
        Unlock an element.

        Adding an id that is already present is a no-op.

        Returns:
            True if the id was newly added, False if it was already unlocked
        """
        if element_id in self._ids:
            return False
        self._ids[element_id] = None
        return True

    def all(self) -> FrozenSet[ElementId]:
        """Get a snapshot of every unlocked id."""
        return frozenset(self._ids)

    def in_unlock_order(self) -> List[ElementId]:
        """Get unlocked ids in the order they were added."""
        return list(self._ids)

    @property
    def size(self) -> int:
        """Get number of unlocked elements."""
        return len(self._ids)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[ElementId]:
        return iter(list(self._ids))
