"""Pure game rules and player-facing messages - no external dependencies."""

from ..models.combination import CombinationOutcome, OutcomeStatus


class GameRules:
    """
    Player-facing texts of the game: status messages shown after each
    action, slot placeholders and the progress readout.
    """

    # Status messages
    READY_MESSAGE = "System ready. Select cards to combine."
    CARD_SELECTED_MESSAGE = "Card selected."
    SLOT_CLEARED_MESSAGE = "Card returned."
    SLOTS_FULL_MESSAGE = "Slots full. Click a slot to remove card."
    INCOMPLETE_SELECTION_MESSAGE = "⚠️ Select two cards first!"
    DISCOVERED_MESSAGE = "✨ SUCCESS! Discovered: {name}"
    REPEATED_MESSAGE = "✅ Crafted: {name} (Already discovered)"
    NO_MATCH_MESSAGE = "❌ Nothing happened. Try different cards."
    NO_DISCOVERIES_MESSAGE = "No discoveries yet."
    LOAD_FAILED_MESSAGE = "Error loading data. Check the catalog source."

    @classmethod
    def slot_placeholder(cls, slot_index: int) -> str:
        """Get placeholder text for an empty slot."""
        return f"Select Card {slot_index}"

    @classmethod
    def outcome_message(cls, outcome: CombinationOutcome) -> str:
        """Get status message for a combine outcome."""
        if outcome.status == OutcomeStatus.DISCOVERED:
            return cls.DISCOVERED_MESSAGE.format(name=outcome.element.name)
        elif outcome.status == OutcomeStatus.REPEATED:
            return cls.REPEATED_MESSAGE.format(name=outcome.element.name)
        else:
            return cls.NO_MATCH_MESSAGE

    @classmethod
    def progress_text(cls, unlocked: int, total: int) -> str:
        """Get progress readout text."""
        return f"Discovered: {unlocked}/{total}"
