"""Players: a strategy plus its state and win/lose/game counters."""

from dataclasses import dataclass, field

from .hand import Hand
from .strategy import Strategy, StrategyState, get_strategy_by_name


@dataclass
class Player:
    """One side of a game.

    A player exclusively owns its strategy state. ``next_hand`` only
    advances the state; counters change in ``win``/``lose``/``draw``.
    """
    name: str
    strategy: Strategy
    state: StrategyState = field(default_factory=StrategyState.initial)
    win_count: int = 0
    lose_count: int = 0
    game_count: int = 0

    def next_hand(self) -> Hand:
        hand, self.state = self.strategy.decide(self.state)
        return hand

    def win(self):
        self.state = self.strategy.learn(True, self.state)
        self.win_count += 1
        self.game_count += 1

    def lose(self):
        self.state = self.strategy.learn(False, self.state)
        self.lose_count += 1
        self.game_count += 1

    def draw(self):
        self.game_count += 1

    @property
    def draw_count(self) -> int:
        return self.game_count - self.win_count - self.lose_count

    @property
    def win_rate(self) -> float:
        return (self.win_count / self.game_count * 100) if self.game_count else 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "strategy": self.strategy.name,
            "seed": self.strategy.seed,
            "win_count": self.win_count,
            "lose_count": self.lose_count,
            "draw_count": self.draw_count,
            "game_count": self.game_count,
            "win_rate": round(self.win_rate, 2),
            "state": self.state.to_dict(),
        }

    def __str__(self):
        return (f"[{self.name}: {self.game_count} games, "
                f"{self.win_count} win, {self.lose_count} lose]")


def new_player(name: str, strategy: Strategy, hand: Hand = Hand.ROCK) -> Player:
    """Create a player with fresh state whose previous hand is ``hand``."""
    return Player(name=name, strategy=strategy, state=StrategyState.initial(hand))


@dataclass(frozen=True)
class PlayerConfig:
    """Picklable recipe for a player, used where fresh players are built
    away from the caller (worker processes, CLI, web requests)."""
    name: str
    strategy: str
    seed: int = 0
    hand: Hand = Hand.ROCK

    def build(self, seed_offset: int = 0) -> Player:
        strategy = get_strategy_by_name(self.strategy, self.seed + seed_offset)
        return new_player(self.name, strategy, self.hand)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "strategy": self.strategy,
            "seed": self.seed,
            "hand": self.hand.label,
        }
