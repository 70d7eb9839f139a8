"""Domain services for the card fusion game."""

from .combination_resolver import CombinationResolver
from .game_rules import GameRules

__all__ = [
    "GameRules",
    "CombinationResolver",
]
