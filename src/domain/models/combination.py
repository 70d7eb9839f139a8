"""Domain model for element combinations."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from .element import Element, ElementId, pair_key


class OutcomeStatus(Enum):
    """Status of a combination attempt."""

    DISCOVERED = "discovered"  # Valid recipe, first unlock this session
    REPEATED = "repeated"  # Valid recipe, element already owned
    NO_MATCH = "no_match"  # No recipe uses this pair


@dataclass(frozen=True)
class Combination:
    """
    Domain model representing a pair of elements put together.

    Order is kept for display only; key and equality of outcomes never
    depend on which element was selected first.
    """

    first: ElementId
    second: ElementId

    @property
    def key(self) -> FrozenSet[ElementId]:
        """Get order-independent key for this combination."""
        return pair_key(self.first, self.second)

    @property
    def display_name(self) -> str:
        """Get human-readable combination name."""
        return f"{self.first} + {self.second}"

    @property
    def is_same_element(self) -> bool:
        """Check if the element is combined with itself."""
        return self.first == self.second

    def swapped(self) -> "Combination":
        """Get the same pair in the opposite order."""
        return Combination(first=self.second, second=self.first)


@dataclass(frozen=True)
class CombinationOutcome:
    """
    Result of resolving a combination.

    Discovered and Repeated carry the matched element; NoMatch carries none.
    """

    status: OutcomeStatus
    element: Optional[Element] = None

    def __post_init__(self):
        """Validate outcome on creation."""
        if self.status == OutcomeStatus.NO_MATCH and self.element is not None:
            raise ValueError("NoMatch outcome cannot have an element")

        if self.status != OutcomeStatus.NO_MATCH and self.element is None:
            raise ValueError(f"{self.status.value} outcome requires an element")

    @property
    def is_match(self) -> bool:
        """Check if a recipe matched (discovered or repeated)."""
        return self.status != OutcomeStatus.NO_MATCH

    @property
    def is_discovery(self) -> bool:
        """Check if outcome unlocked a new element."""
        return self.status == OutcomeStatus.DISCOVERED

    @property
    def is_repeat(self) -> bool:
        """Check if outcome matched an element already owned."""
        return self.status == OutcomeStatus.REPEATED

    @classmethod
    def discovered(cls, element: Element) -> "CombinationOutcome":
        """Create a first-time discovery outcome."""
        return cls(status=OutcomeStatus.DISCOVERED, element=element)

    @classmethod
    def repeated(cls, element: Element) -> "CombinationOutcome":
        """Create an already-owned outcome."""
        return cls(status=OutcomeStatus.REPEATED, element=element)

    @classmethod
    def no_match(cls) -> "CombinationOutcome":
        """Create a no-match outcome."""
        return cls(status=OutcomeStatus.NO_MATCH)
