"""Domain model for the two selection slots."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from ..errors import IncompleteSelection, InvalidSelection, InvalidSlotIndex, SlotsFull
from .combination import Combination
from .element import ElementId
from .unlock_set import UnlockSet


class SelectionState(Enum):
    """State of the selection slots."""

    IDLE = "idle"  # Zero or one slot filled
    READY = "ready"  # Both slots filled, combine may run


@dataclass
class SelectionSlots:
    """
    Domain model representing the staging area for a pending combination.

    Holds at most two unlocked element ids. Selecting fills the first empty
    slot (slot 1 before slot 2); when both are taken a selection is rejected
    and the caller has to clear a slot first. Slot indexes are 1-based.
    """

    CAPACITY: ClassVar[int] = 2

    unlocked: UnlockSet
    allow_duplicates: bool = True
    _slots: List[Optional[ElementId]] = field(default_factory=lambda: [None] * SelectionSlots.CAPACITY)

    @property
    def state(self) -> SelectionState:
        """Get current selection state."""
        return SelectionState.READY if self.is_full() else SelectionState.IDLE

    @property
    def contents(self) -> Tuple[Optional[ElementId], ...]:
        """Get slot contents in order, None for empty slots."""
        return tuple(self._slots)

    @property
    def filled_count(self) -> int:
        """Get number of occupied slots."""
        return sum(1 for occupant in self._slots if occupant is not None)

    def is_full(self) -> bool:
        """Check if both slots are occupied."""
        return self.filled_count == self.CAPACITY

    def is_empty(self) -> bool:
        """Check if no slot is occupied."""
        return self.filled_count == 0

    def select(self, element_id: ElementId) -> int:
        """
        Put an unlocked element into the first empty slot.

        Args:
            element_id: Id of the element to stage

        Returns:
            1-based index of the slot that was filled

        Raises:
            InvalidSelection: If the element is not unlocked, or it already
                occupies a slot while duplicates are disallowed
            SlotsFull: If both slots are occupied
        """
        if not self.unlocked.contains(element_id):
            raise InvalidSelection(element_id)

        if self.is_full():
            raise SlotsFull()

        if not self.allow_duplicates and element_id in self._slots:
            raise InvalidSelection(element_id, "element already occupies a slot")

        for index, occupant in enumerate(self._slots):
            if occupant is None:
                self._slots[index] = element_id
                return index + 1

    def clear(self, slot_index: int) -> Optional[ElementId]:
        """
        Empty exactly one slot.

        Args:
            slot_index: 1 or 2

        Returns:
            The id that was removed, or None if the slot was already empty

        Raises:
            InvalidSlotIndex: If slot_index is not a valid slot
        """
        position = self._position(slot_index)
        removed = self._slots[position]
        self._slots[position] = None
        return removed

    def clear_all(self) -> int:
        """Empty both slots and return how many were occupied."""
        count = self.filled_count
        self._slots = [None] * self.CAPACITY
        return count

    def combination(self) -> Combination:
        """
        Get the staged pair.

        Raises:
            IncompleteSelection: If fewer than two slots are filled
        """
        if not self.is_full():
            raise IncompleteSelection(self.filled_count)
        first, second = self._slots
        return Combination(first=first, second=second)

    def _position(self, slot_index: int) -> int:
        if isinstance(slot_index, bool) or not isinstance(slot_index, int):
            raise InvalidSlotIndex(slot_index, self.CAPACITY)
        if not 1 <= slot_index <= self.CAPACITY:
            raise InvalidSlotIndex(slot_index, self.CAPACITY)
        return slot_index - 1
