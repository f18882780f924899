"""Rock-Paper-Scissors strategy simulator."""

from .hand import Hand, Outcome, strength, from_index
from .strategy import (
    Strategy,
    StrategyState,
    WinningStrategy,
    ProbeStrategy,
    get_strategy_by_name,
)
from .player import Player, PlayerConfig, new_player
from .engine import GameResult, play_game, run_game

__all__ = [
    "Hand",
    "Outcome",
    "strength",
    "from_index",
    "Strategy",
    "StrategyState",
    "WinningStrategy",
    "ProbeStrategy",
    "get_strategy_by_name",
    "Player",
    "PlayerConfig",
    "new_player",
    "GameResult",
    "play_game",
    "run_game",
]
