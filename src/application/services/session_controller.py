"""Session controller - the single owner of a player's game state."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from application.interfaces import ILoggingService
from domain.errors import CardFusionError, IncompleteSelection, InvalidSelection, InvalidSlotIndex, SlotsFull
from domain.models import (
    Catalog,
    Combination,
    CombinationOutcome,
    ElementId,
    SelectionSlots,
    SelectionState,
    UnlockSet,
    is_valid_element_id,
)
from domain.services import CombinationResolver, GameRules


@dataclass(frozen=True)
class ActionReport:
    """
    What happened after one player action.

    Rejected actions carry the error and leave the session untouched.
    """

    action: str
    accepted: bool
    message: str
    outcome: Optional[CombinationOutcome] = None
    error: Optional[CardFusionError] = None
    slot_index: Optional[int] = None

    @property
    def is_error(self) -> bool:
        """Check if the action was rejected with an error."""
        return self.error is not None


@dataclass(frozen=True)
class SessionSnapshot:
    """Observable session state for the rendering layer, taken after an action."""

    unlocked_ids: FrozenSet[ElementId]
    slots: Tuple[Optional[ElementId], ...]
    state: SelectionState
    unlocked_count: int
    total_count: int
    discovered_count: int
    discoverable_count: int
    last_message: str
    last_outcome: Optional[CombinationOutcome] = None
    last_error: Optional[CardFusionError] = None

    @property
    def progress_text(self) -> str:
        """Get progress readout over the whole library."""
        return GameRules.progress_text(self.unlocked_count, self.total_count)

    @property
    def is_complete(self) -> bool:
        """Check if every discoverable element has been found."""
        return self.discovered_count == self.discoverable_count


class SessionController:
    """
    Orchestrates one game session.

    RESPONSIBILITIES (Coordination Only):
    - Own the unlock set and the selection slots of this session
    - Turn player actions into slot and unlock set changes
    - Delegate pair resolution to CombinationResolver
    - Record the latest outcome or error for the UI to show

    Domain components raise errors; the controller catches the recoverable
    ones and reports them, leaving state unchanged.
    """

    def __init__(
        self,
        catalog: Catalog,
        logging_service: ILoggingService,
        allow_duplicate_selection: bool = True,
        resolver: Optional[CombinationResolver] = None,
    ):
        """
        Initialize a fresh session.

        Args:
            catalog: Loaded catalog, shared read-only
            logging_service: Service for logging
            allow_duplicate_selection: Whether one element may fill both slots
            resolver: Resolver to use; defaults to an index-backed resolver
        """
        self.catalog = catalog
        self.logger = logging_service
        self.resolver = resolver or CombinationResolver()

        self.unlocked = UnlockSet.seeded_from(catalog)
        self.slots = SelectionSlots(self.unlocked, allow_duplicates=allow_duplicate_selection)

        self.last_report: Optional[ActionReport] = None
        self.last_message = GameRules.READY_MESSAGE
        self.history: List[Tuple[Combination, CombinationOutcome]] = []

        self.stats = {
            "selections": 0,
            "combine_attempts": 0,
            "discoveries": 0,
            "repeats": 0,
            "no_matches": 0,
            "rejected_actions": 0,
            "session_start": datetime.now(),
        }

        self.logger.debug(f"🎮 Session started with {len(self.unlocked)} base elements")

    @classmethod
    def from_config(cls, catalog: Catalog, logging_service: ILoggingService, settings) -> "SessionController":
        """Create a session using rule settings from a Config."""
        return cls(
            catalog,
            logging_service,
            allow_duplicate_selection=settings.ALLOW_DUPLICATE_SELECTION,
            resolver=CombinationResolver(use_index=settings.USE_RECIPE_INDEX),
        )

    # ================================
    # PLAYER ACTIONS
    # ================================

    def select_element(self, element_id: ElementId) -> ActionReport:
        """
        Stage an element in the first empty slot.

        Rejected with InvalidSelection for unknown or locked ids and with
        SlotsFull when both slots are taken.
        """
        try:
            if not is_valid_element_id(element_id) or element_id not in self.catalog:
                raise InvalidSelection(element_id, "no such element")
            slot_index = self.slots.select(element_id)
        except (InvalidSelection, SlotsFull) as e:
            return self._reject("select", e)

        self.stats["selections"] += 1
        self.logger.debug(f"🃏 Selected {element_id!r} into slot {slot_index}")
        return self._accept("select", GameRules.CARD_SELECTED_MESSAGE, slot_index=slot_index)

    def clear_slot(self, slot_index: int) -> ActionReport:
        """Return the card in one slot (1 or 2)."""
        try:
            removed = self.slots.clear(slot_index)
        except InvalidSlotIndex as e:
            return self._reject("clear", e)

        self.logger.debug(f"↩️ Cleared slot {slot_index} (was {removed!r})")
        return self._accept("clear", GameRules.SLOT_CLEARED_MESSAGE, slot_index=slot_index)

    def attempt_combine(self) -> ActionReport:
        """
        Combine the two staged elements.

        Discovered unlocks the element and empties both slots; Repeated only
        empties the slots; NoMatch keeps both slots so one card can be swapped.
        """
        try:
            combination = self.slots.combination()
        except IncompleteSelection as e:
            return self._reject("combine", e)

        self.stats["combine_attempts"] += 1
        outcome = self.resolver.resolve_combination(combination, self.catalog, self.unlocked)
        self.history.append((combination, outcome))

        if outcome.is_discovery:
            self.unlocked.add(outcome.element.element_id)
            self.slots.clear_all()
            self.stats["discoveries"] += 1
            self.logger.info(f"🎉 DISCOVERED: {combination.display_name} → {outcome.element.name}")
        elif outcome.is_repeat:
            self.slots.clear_all()
            self.stats["repeats"] += 1
            self.logger.debug(f"🔁 Repeated: {combination.display_name} → {outcome.element.name}")
        else:
            self.stats["no_matches"] += 1
            self.logger.debug(f"⚪ No match: {combination.display_name}")

        return self._accept("combine", GameRules.outcome_message(outcome), outcome=outcome)

    # ================================
    # OBSERVABLE STATE
    # ================================

    @property
    def state(self) -> SelectionState:
        """Get current state of the session state machine."""
        return self.slots.state

    @property
    def discovered_count(self) -> int:
        """Get number of unlocked elements above tier 0."""
        return sum(1 for element in self.catalog.discoverable_elements() if element.element_id in self.unlocked)

    def is_unlocked(self, element_id: ElementId) -> bool:
        """Check if the player owns an element."""
        return self.unlocked.contains(element_id)

    def snapshot(self) -> SessionSnapshot:
        """Get observable state for the rendering layer."""
        last = self.last_report
        return SessionSnapshot(
            unlocked_ids=self.unlocked.all(),
            slots=self.slots.contents,
            state=self.state,
            unlocked_count=len(self.unlocked),
            total_count=self.catalog.total_count,
            discovered_count=self.discovered_count,
            discoverable_count=self.catalog.discoverable_count,
            last_message=self.last_message,
            last_outcome=last.outcome if last else None,
            last_error=last.error if last else None,
        )

    def get_session_stats(self) -> Dict[str, Any]:
        """Get statistics about this session."""
        duration = datetime.now() - self.stats["session_start"]
        attempts = self.stats["combine_attempts"]
        matches = self.stats["discoveries"] + self.stats["repeats"]
        return {
            **{key: value for key, value in self.stats.items() if key != "session_start"},
            "unlocked": len(self.unlocked),
            "match_rate": matches / attempts * 100 if attempts else 0,
            "session_duration_minutes": int(duration.total_seconds() / 60),
        }

    # ================================
    # INTERNALS
    # ================================

    def _accept(self, action: str, message: str, **details) -> ActionReport:
        report = ActionReport(action=action, accepted=True, message=message, **details)
        return self._record(report)

    def _reject(self, action: str, error: CardFusionError) -> ActionReport:
        self.stats["rejected_actions"] += 1
        self.logger.debug(f"🚫 {action} rejected: {error}")
        report = ActionReport(action=action, accepted=False, message=self._error_message(error), error=error)
        return self._record(report)

    def _record(self, report: ActionReport) -> ActionReport:
        self.last_report = report
        self.last_message = report.message
        return report

    @staticmethod
    def _error_message(error: CardFusionError) -> str:
        if isinstance(error, IncompleteSelection):
            return GameRules.INCOMPLETE_SELECTION_MESSAGE
        if isinstance(error, SlotsFull):
            return GameRules.SLOTS_FULL_MESSAGE
        return str(error)
