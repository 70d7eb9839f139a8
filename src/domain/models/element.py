"""Domain model for game elements and their recipes."""

from dataclasses import dataclass
from typing import Any, FrozenSet, Optional, Tuple, Union

ElementId = Union[str, int]


def is_valid_element_id(value: Any) -> bool:
    """Check if value can serve as an element identifier (non-empty str or int)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(value.strip())


def pair_key(first: ElementId, second: ElementId) -> FrozenSet[ElementId]:
    """
    Get the order-independent key for a pair of element ids.

    A frozenset drops multiplicity, so the pair (a, a) collapses to {a}. The
    key stays unambiguous because a pair of two distinct ids always gives a
    two-item set, never a one-item one.
    """
    return frozenset((first, second))


@dataclass(frozen=True, eq=False)
class Recipe:
    """
    An unordered pair of element ids that produces an element.

    Equality and hashing ignore order, so Recipe("water", "earth")
    equals Recipe("earth", "water").
    """

    first: ElementId
    second: ElementId

    def __post_init__(self):
        """Validate both ingredients on creation."""
        for ingredient in (self.first, self.second):
            if not is_valid_element_id(ingredient):
                raise ValueError(f"Recipe ingredient {ingredient!r} is not a valid element id")

    @property
    def key(self) -> FrozenSet[ElementId]:
        """Get normalized key for this recipe."""
        return pair_key(self.first, self.second)

    @property
    def display_name(self) -> str:
        """Get human-readable recipe name."""
        return f"{self.first} + {self.second}"

    def matches(self, first: ElementId, second: ElementId) -> bool:
        """Check if the given pair (in any order) is this recipe."""
        return self.key == pair_key(first, second)

    def contains(self, element_id: ElementId) -> bool:
        """Check if recipe uses a specific element id."""
        return element_id in (self.first, self.second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def to_list(self) -> list:
        """Convert to the two-item list used by catalog files."""
        return [self.first, self.second]

    @classmethod
    def from_list(cls, data: Any) -> "Recipe":
        """Create Recipe from a two-item list."""
        if not isinstance(data, (list, tuple)) or len(data) != 2:
            raise ValueError(f"Recipe must be a list of exactly two element ids, got {data!r}")
        return cls(first=data[0], second=data[1])


@dataclass(frozen=True)
class Element:
    """
    Domain model representing a card element.

    Immutable once created; the catalog hands the same instances to every
    session. Name and image are display metadata and never affect game logic.
    """

    element_id: ElementId
    name: str = ""
    tier: int = 0
    image: str = ""
    recipes: Tuple[Recipe, ...] = ()

    def __post_init__(self):
        """Validate element data on creation."""
        if not is_valid_element_id(self.element_id):
            raise ValueError(f"Element ID {self.element_id!r} must be a non-empty string or an integer")

        if not isinstance(self.name, str):
            raise ValueError(f"Element {self.element_id!r} name must be a string, got {self.name!r}")

        # Unnamed elements are shown by their id
        if not self.name.strip():
            object.__setattr__(self, "name", str(self.element_id))

        if isinstance(self.tier, bool) or not isinstance(self.tier, int) or self.tier < 0:
            raise ValueError(f"Element {self.element_id!r} tier must be a non-negative integer, got {self.tier!r}")

        # Drop duplicate recipes while keeping file order
        unique = tuple(dict.fromkeys(self.recipes))
        object.__setattr__(self, "recipes", unique)

        for recipe in self.recipes:
            if recipe.contains(self.element_id):
                raise ValueError(f"Element {self.element_id!r} cannot be crafted from itself ({recipe.display_name})")

    @property
    def is_base_element(self) -> bool:
        """Check if this is a tier 0 element available from the start."""
        return self.tier == 0

    @property
    def is_discoverable(self) -> bool:
        """Check if element must be discovered through combination."""
        return self.tier > 0

    def can_be_crafted_from(self, first: ElementId, second: ElementId) -> bool:
        """Check if any recipe of this element matches the pair."""
        return any(recipe.matches(first, second) for recipe in self.recipes)

    def referenced_ids(self) -> FrozenSet[ElementId]:
        """Get every element id used in this element's recipes."""
        return frozenset(ingredient for recipe in self.recipes for ingredient in (recipe.first, recipe.second))

    @classmethod
    def from_dict(cls, data: dict) -> "Element":
        """Create Element from a catalog library record."""
        if not isinstance(data, dict):
            raise ValueError(f"Element record must be an object, got {type(data).__name__}")

        for required in ("id", "tier"):
            if required not in data:
                raise ValueError(f"Element record is missing '{required}': {data!r}")

        raw_recipes = data.get("recipes", [])
        if not isinstance(raw_recipes, list):
            raise ValueError(f"Element {data['id']!r} recipes must be a list")

        name = data.get("name")
        image: Optional[str] = data.get("image")
        return cls(
            element_id=data["id"],
            name="" if name is None else name,
            tier=data["tier"],
            image=image or "",
            recipes=tuple(Recipe.from_list(item) for item in raw_recipes),
        )

    def to_dict(self) -> dict:
        """Convert to a catalog library record."""
        return {
            "id": self.element_id,
            "name": self.name,
            "tier": self.tier,
            "image": self.image,
            "recipes": [recipe.to_list() for recipe in self.recipes],
        }
