"""Business logic for resolving a pair of elements into an outcome."""

from typing import Container, Optional

from ..models.catalog import Catalog
from ..models.combination import Combination, CombinationOutcome
from ..models.element import Element, ElementId


class CombinationResolver:
    """
    Maps a pair of element ids to a combination outcome.

    Stateless: the same pair, catalog and unlocked ids always give the same
    outcome, whichever order the pair is given in. Two lookup strategies give
    identical answers on a validated catalog:

    - the precomputed recipe index of the catalog (default)
    - a linear scan of every element's recipes in catalog order
    """

    def __init__(self, use_index: bool = True):
        """
        Initialize resolver.

        Args:
            use_index: Resolve through the catalog's recipe index instead of
                scanning every recipe
        """
        self.use_index = use_index

    def find_result(self, first: ElementId, second: ElementId, catalog: Catalog) -> Optional[Element]:
        """Get the element produced by a pair, or None if no recipe matches."""
        if self.use_index:
            return catalog.find_by_recipe(first, second)
        return self.scan_for_result(first, second, catalog)

    @staticmethod
    def scan_for_result(first: ElementId, second: ElementId, catalog: Catalog) -> Optional[Element]:
        """
        Scan recipes in catalog order and return the first element that matches.

        Used as the reference lookup; the recipe index must agree with it.
        """
        for element in catalog:
            for recipe in element.recipes:
                if recipe.matches(first, second):
                    return element
        return None

    def resolve(
        self, first: ElementId, second: ElementId, catalog: Catalog, unlocked: Container[ElementId]
    ) -> CombinationOutcome:
        """
        Resolve a pair of element ids into an outcome.

        Args:
            first: Id in the first slot
            second: Id in the second slot
            catalog: Catalog holding every recipe
            unlocked: Ids the player currently owns

        Returns:
            Discovered if the result is new, Repeated if already owned,
            NoMatch if no recipe uses the pair
        """
        result = self.find_result(first, second, catalog)

        if result is None:
            return CombinationOutcome.no_match()

        if result.element_id in unlocked:
            return CombinationOutcome.repeated(result)

        return CombinationOutcome.discovered(result)

    def resolve_combination(
        self, combination: Combination, catalog: Catalog, unlocked: Container[ElementId]
    ) -> CombinationOutcome:
        """Resolve a staged Combination."""
        return self.resolve(combination.first, combination.second, catalog, unlocked)
