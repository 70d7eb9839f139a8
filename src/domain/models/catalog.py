"""Domain model for the element catalog."""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..errors import LoadError
from .element import Element, ElementId, pair_key


class Catalog:
    """
    Immutable registry of every element and its recipes.

    A Catalog is validated completely on construction and never changes
    afterwards, so one instance can back any number of sessions. Construction
    raises LoadError instead of producing a catalog that breaks an invariant:

    - element ids are unique
    - every id used in a recipe exists in the catalog
    - at least one tier 0 element exists
    - no element is crafted from itself (checked by Element)
    - no unordered pair is claimed as a recipe by two different elements
    """

    def __init__(self, elements: Iterable[Element], topic: str = ""):
        """
        Build and validate a catalog.

        Args:
            elements: Element definitions in catalog order
            topic: Display title of the catalog (not used by game logic)
        """
        self._elements: Tuple[Element, ...] = tuple(elements)
        self._topic = topic
        self._by_id: Dict[ElementId, Element] = {}
        self._recipe_index: Dict[FrozenSet[ElementId], Element] = {}

        self._index_elements()
        self._check_references()
        self._check_base_elements()
        self._index_recipes()

    # ================================
    # VALIDATION
    # ================================

    def _index_elements(self) -> None:
        if not self._elements:
            raise LoadError("Catalog library is empty")

        for element in self._elements:
            if element.element_id in self._by_id:
                raise LoadError(f"Duplicate element id {element.element_id!r}")
            self._by_id[element.element_id] = element

    def _check_references(self) -> None:
        for element in self._elements:
            for recipe in element.recipes:
                for ingredient in (recipe.first, recipe.second):
                    if ingredient not in self._by_id:
                        raise LoadError(
                            f"Element {element.element_id!r} recipe {recipe.display_name} "
                            f"references unknown element {ingredient!r}"
                        )

    def _check_base_elements(self) -> None:
        if not any(element.is_base_element for element in self._elements):
            raise LoadError("Catalog has no tier 0 elements to start with")

    def _index_recipes(self) -> None:
        for element in self._elements:
            for recipe in element.recipes:
                claimant = self._recipe_index.get(recipe.key)
                if claimant is not None and claimant is not element:
                    raise LoadError(
                        f"Recipe {recipe.display_name} is claimed by both "
                        f"{claimant.element_id!r} and {element.element_id!r}"
                    )
                self._recipe_index[recipe.key] = element

    # ================================
    # LOOKUP
    # ================================

    @property
    def topic(self) -> str:
        """Get the catalog display title."""
        return self._topic

    @property
    def elements(self) -> Tuple[Element, ...]:
        """Get all elements in catalog order."""
        return self._elements

    @property
    def recipe_index(self) -> Mapping[FrozenSet[ElementId], Element]:
        """Get read-only mapping from normalized recipe pair to result element."""
        return MappingProxyType(self._recipe_index)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._by_id

    def lookup(self, element_id: ElementId) -> Optional[Element]:
        """Get element by id, or None if the catalog has no such element."""
        return self._by_id.get(element_id)

    def elements_by_tier(self, tier: int) -> List[Element]:
        """Get elements of a specific tier in catalog order."""
        return [element for element in self._elements if element.tier == tier]

    def base_elements(self) -> List[Element]:
        """Get tier 0 elements in catalog order."""
        return self.elements_by_tier(0)

    def discoverable_elements(self) -> List[Element]:
        """Get elements with tier above 0 in catalog order."""
        return [element for element in self._elements if element.is_discoverable]

    def find_by_recipe(self, first: ElementId, second: ElementId) -> Optional[Element]:
        """Get the element produced by a pair using the precomputed index."""
        return self._recipe_index.get(pair_key(first, second))

    def tiers(self) -> List[int]:
        """Get distinct tiers present in the catalog, ascending."""
        return sorted({element.tier for element in self._elements})

    @property
    def total_count(self) -> int:
        """Get number of elements in the catalog."""
        return len(self._elements)

    @property
    def discoverable_count(self) -> int:
        """Get number of elements that must be discovered."""
        return len(self.discoverable_elements())

    def get_summary(self) -> dict:
        """Get summary of catalog contents for logging/debugging."""
        return {
            "topic": self._topic,
            "elements": self.total_count,
            "base_elements": len(self.base_elements()),
            "discoverable": self.discoverable_count,
            "recipes": len(self._recipe_index),
            "tiers": self.tiers(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        """
        Create Catalog from a catalog document.

        The document holds ``meta.topic`` (display title) and ``library``,
        the ordered list of element records.

        Raises:
            LoadError: If the document is malformed or breaks an invariant
        """
        if not isinstance(data, dict):
            raise LoadError(f"Catalog document must be an object, got {type(data).__name__}")

        meta = data.get("meta") or {}
        if not isinstance(meta, dict):
            raise LoadError("Catalog 'meta' must be an object")

        library = data.get("library")
        if not isinstance(library, list):
            raise LoadError("Catalog 'library' must be a list of element records")

        elements = []
        for position, record in enumerate(library):
            try:
                elements.append(Element.from_dict(record))
            except ValueError as e:
                raise LoadError(f"Invalid element record #{position}: {e}") from e

        topic = meta.get("topic", "")
        return cls(elements, topic=topic if isinstance(topic, str) else str(topic))

    def to_dict(self) -> dict:
        """Convert back to a catalog document."""
        return {
            "meta": {"topic": self._topic},
            "library": [element.to_dict() for element in self._elements],
        }
