"""Text presentation of a session for console play."""

from typing import List

from domain.models import Element
from domain.services import GameRules

from .session_controller import SessionController


class BoardPresenter:
    """
    Builds the text board shown after every action.

    Read-only view over a SessionController: base cards in the inventory,
    discovered cards in the library, the two slots, progress and the latest
    status message.
    """

    def __init__(self, session: SessionController, width: int = 60):
        self.session = session
        self.width = width

    def inventory(self) -> List[Element]:
        """Get unlocked tier 0 elements in catalog order."""
        return [
            element
            for element in self.session.catalog.base_elements()
            if self.session.is_unlocked(element.element_id)
        ]

    def library(self) -> List[Element]:
        """Get discovered elements (tier above 0) in catalog order."""
        return [
            element
            for element in self.session.catalog.discoverable_elements()
            if self.session.is_unlocked(element.element_id)
        ]

    def slot_labels(self) -> List[str]:
        """Get label per slot: card name or placeholder text."""
        labels = []
        for index, element_id in enumerate(self.session.slots.contents, start=1):
            if element_id is None:
                labels.append(GameRules.slot_placeholder(index))
            else:
                labels.append(self.card_label(self.session.catalog.lookup(element_id)))
        return labels

    @staticmethod
    def card_label(element: Element) -> str:
        """Get label for a card, with the id the player types to select it."""
        if str(element.element_id) == element.name:
            return element.name
        return f"{element.name} [{element.element_id}]"

    def render(self) -> str:
        """Render the whole board as text."""
        snapshot = self.session.snapshot()
        library = self.library()

        lines = ["=" * self.width]
        if self.session.catalog.topic:
            lines.append(f"📚 {self.session.catalog.topic}")
            lines.append("-" * self.width)

        lines.append("🧺 Inventory: " + ", ".join(self.card_label(element) for element in self.inventory()))
        if library:
            lines.append("🔬 Library: " + ", ".join(self.card_label(element) for element in library))
        else:
            lines.append(f"🔬 Library: {GameRules.NO_DISCOVERIES_MESSAGE}")

        first, second = self.slot_labels()
        lines.append(f"🃏 Slots: [1] {first}  +  [2] {second}")
        lines.append(f"📈 {snapshot.progress_text}")
        lines.append(f"💬 {snapshot.last_message}")
        lines.append("=" * self.width)
        return "\n".join(lines)
