"""Hand-selection strategies (Winning, Probe) and their shared state."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from .hand import Hand, from_index

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31

History = tuple[tuple[int, int, int], ...]

EMPTY_HISTORY: History = ((0, 0, 0), (0, 0, 0), (0, 0, 0))


def lcg_next(seed: int) -> int:
    """One step of the linear-congruential generator."""
    return (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS


# ---------------------------------------------------------------------------
# History table access
# ---------------------------------------------------------------------------

def _cell(history: History, row: int, col: int) -> int:
    """Read history[row][col]; 0 when either index is out of range."""
    if 0 <= row < len(history) and 0 <= col < len(history[row]):
        return history[row][col]
    return 0


def _row_sum(history: History, row: int) -> int:
    if 0 <= row < len(history):
        return sum(history[row])
    return 0


def _bump(history: History, row: int, col: int) -> History:
    """Return a copy of ``history`` with one cell incremented.

    Out-of-range indices leave the table unchanged.
    """
    if not (0 <= row < len(history) and 0 <= col < len(history[row])):
        return history
    return tuple(
        tuple(v + 1 if (r, c) == (row, col) else v for c, v in enumerate(cells))
        for r, cells in enumerate(history)
    )


@dataclass(frozen=True)
class StrategyState:
    """Per-player state threaded through ``decide`` and ``learn``."""
    won: bool
    prev_hand: Hand
    history: History = EMPTY_HISTORY
    current_hand_value: int = 0

    @classmethod
    def initial(cls, hand: Hand = Hand.ROCK) -> "StrategyState":
        return cls(won=False, prev_hand=hand, history=EMPTY_HISTORY,
                   current_hand_value=hand.value)

    def to_dict(self) -> dict:
        return {
            "won": self.won,
            "prev_hand": self.prev_hand.label,
            "history": [list(row) for row in self.history],
            "current_hand_value": self.current_hand_value,
        }


class Strategy(ABC):
    """Base class for strategies.

    A strategy holds only its fixed configuration. Everything that changes
    between rounds lives in the ``StrategyState`` passed in and returned.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def decide(self, state: StrategyState) -> tuple[Hand, StrategyState]:
        ...

    @abstractmethod
    def learn(self, won: bool, state: StrategyState) -> StrategyState:
        ...

    def __eq__(self, other):
        return type(self) is type(other) and self.seed == other.seed

    def __hash__(self):
        return hash((type(self), self.seed))

    def __repr__(self):
        return f"<{self.name} seed={self.seed}>"


class WinningStrategy(Strategy):
    """Stay on a win, otherwise pick a pseudo-random hand.

    After a winning round the previous hand is played again. After a loss
    or draw the hand comes from one LCG step seeded with
    ``seed + prev_hand.value``. The generator is rebuilt on every call, so
    the same seed and previous hand always give the same next hand.
    """
    name = "Winning"

    def decide(self, state):
        if state.won:
            return state.prev_hand, state
        hand = from_index(lcg_next(self.seed + state.prev_hand.value) % 3)
        return hand, replace(state, prev_hand=hand, current_hand_value=hand.value)

    def learn(self, won, state):
        return replace(state, won=won)


class ProbeStrategy(Strategy):
    """Sample the next hand from a prev-hand -> next-hand frequency table.

    The row is the hand chosen on the previous call. While that row is
    empty the choice is ``seed % 3``. Once it has counts, ``seed % total``
    is used as the bet and walked through the row's cumulative counts.

    Learning reinforces the transition that won. On a loss it reinforces
    the hand one step further in the cycle instead of the hand played.
    """
    name = "Probe"

    def decide(self, state):
        row = state.current_hand_value
        total = _row_sum(state.history, row)
        if total == 0:
            index = self.seed % 3
        else:
            bet = self.seed % total
            if bet < _cell(state.history, row, 0):
                index = 0
            elif bet < _cell(state.history, row, 0) + _cell(state.history, row, 1):
                index = 1
            else:
                index = 2
        hand = from_index(index)
        return hand, replace(state, prev_hand=from_index(row), current_hand_value=index)

    def learn(self, won, state):
        prev = state.prev_hand.value
        current = state.current_hand_value
        col = current if won else (current + 1) % 3
        return replace(state, won=won, history=_bump(state.history, prev, col))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

STRATEGY_CLASSES = [WinningStrategy, ProbeStrategy]


def get_all_strategies(seed: int = 0) -> list[Strategy]:
    """Return one instance of every strategy."""
    return [cls(seed) for cls in STRATEGY_CLASSES]


def get_strategy_by_name(name: str, seed: int = 0) -> Strategy:
    """Get a strategy instance by name (case-insensitive)."""
    name_lower = name.lower()
    for cls in STRATEGY_CLASSES:
        if cls.name.lower() == name_lower:
            return cls(seed)
    available = ", ".join(cls.name for cls in STRATEGY_CLASSES)
    raise ValueError(f"Unknown strategy: '{name}'. Available: {available}")
