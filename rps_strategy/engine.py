"""Round loop for two-player games."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .hand import Hand, Outcome, strength
from .player import Player

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 100


@dataclass
class GameResult:
    """Result of a game between two players."""
    player_a_name: str
    player_b_name: str
    strategy_a_name: str
    strategy_b_name: str
    rounds: int
    a_wins: int = 0
    b_wins: int = 0
    draws: int = 0
    a_hands: list = field(default_factory=list)
    b_hands: list = field(default_factory=list)
    player_a: Optional[Player] = field(default=None, repr=False)
    player_b: Optional[Player] = field(default=None, repr=False)

    @property
    def a_win_pct(self) -> float:
        return (self.a_wins / self.rounds * 100) if self.rounds else 0.0

    @property
    def b_win_pct(self) -> float:
        return (self.b_wins / self.rounds * 100) if self.rounds else 0.0

    @property
    def draw_pct(self) -> float:
        return (self.draws / self.rounds * 100) if self.rounds else 0.0

    @property
    def a_hand_distribution(self) -> dict[str, int]:
        return dict(Counter(h.label for h in self.a_hands))

    @property
    def b_hand_distribution(self) -> dict[str, int]:
        return dict(Counter(h.label for h in self.b_hands))

    @property
    def winner(self) -> str:
        if self.a_wins > self.b_wins:
            return self.player_a_name
        if self.b_wins > self.a_wins:
            return self.player_b_name
        return "DRAW"

    def to_dict(self) -> dict:
        return {
            "player_a": self.player_a_name,
            "player_b": self.player_b_name,
            "strategy_a": self.strategy_a_name,
            "strategy_b": self.strategy_b_name,
            "rounds": self.rounds,
            "a_wins": self.a_wins,
            "b_wins": self.b_wins,
            "draws": self.draws,
            "a_win_pct": round(self.a_win_pct, 2),
            "b_win_pct": round(self.b_win_pct, 2),
            "draw_pct": round(self.draw_pct, 2),
            "a_hand_distribution": self.a_hand_distribution,
            "b_hand_distribution": self.b_hand_distribution,
            "winner": self.winner,
        }


def run_game(
    player_a: Player,
    player_b: Player,
    rounds: int = DEFAULT_ROUNDS,
    record_rounds: bool = True,
) -> GameResult:
    """Play exactly ``rounds`` rounds between two players.

    Both hands of a round are chosen before either player hears the
    outcome. The players are updated in place and attached to the result.

    Args:
        record_rounds: If False, skip storing per-round hands in the result.
    """
    if rounds < 0:
        raise ValueError(f"rounds must be non-negative, got {rounds}")

    result = GameResult(
        player_a_name=player_a.name,
        player_b_name=player_b.name,
        strategy_a_name=player_a.strategy.name,
        strategy_b_name=player_b.strategy.name,
        rounds=rounds,
        player_a=player_a,
        player_b=player_b,
    )

    a_wins = 0
    b_wins = 0
    draws = 0

    for round_num in range(rounds):
        hand_a = player_a.next_hand()
        hand_b = player_b.next_hand()

        outcome = strength(hand_a, hand_b)
        if outcome is Outcome.WIN:
            player_a.win()
            player_b.lose()
            a_wins += 1
        elif outcome is Outcome.LOSE:
            player_a.lose()
            player_b.win()
            b_wins += 1
        else:
            player_a.draw()
            player_b.draw()
            draws += 1

        logger.debug("round %d: %s %s vs %s %s -> %s", round_num + 1,
                     player_a.name, hand_a.label, player_b.name, hand_b.label,
                     outcome.value)

        if record_rounds:
            result.a_hands.append(hand_a)
            result.b_hands.append(hand_b)

    result.a_wins = a_wins
    result.b_wins = b_wins
    result.draws = draws
    return result


def play_game(player_a: Player, player_b: Player, rounds: int = DEFAULT_ROUNDS) -> tuple[Player, Player]:
    """Play a game and return the two players with their final counters."""
    run_game(player_a, player_b, rounds=rounds, record_rounds=False)
    return player_a, player_b


def judge(hand_a: Hand, hand_b: Hand) -> str:
    """Describe a single comparison for console output."""
    outcome = strength(hand_a, hand_b)
    if outcome is Outcome.DRAW:
        return f"{hand_a.label} vs {hand_b.label}: draw"
    if outcome is Outcome.WIN:
        return f"{hand_a.label} vs {hand_b.label}: {hand_a.label} wins"
    return f"{hand_a.label} vs {hand_b.label}: {hand_b.label} wins"


HAND_COMPARISONS = [
    (Hand.ROCK, Hand.SCISSORS),
    (Hand.PAPER, Hand.SCISSORS),
    (Hand.PAPER, Hand.PAPER),
]
