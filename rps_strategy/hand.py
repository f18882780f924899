"""Hands and the cyclic strength rule."""

from enum import Enum


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class Hand(Enum):
    ROCK = 0
    SCISSORS = 1
    PAPER = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def strength(self, other: "Hand") -> Outcome:
        return strength(self, other)

    def is_stronger_than(self, other: "Hand") -> bool:
        return strength(self, other) is Outcome.WIN

    def is_weaker_than(self, other: "Hand") -> bool:
        return strength(self, other) is Outcome.LOSE

    @classmethod
    def parse(cls, text: str) -> "Hand":
        """Look up a hand by name (case-insensitive)."""
        key = text.strip().upper()
        try:
            return cls[key]
        except KeyError:
            available = ", ".join(h.label for h in cls)
            raise ValueError(f"Unknown hand: '{text}'. Available: {available}") from None


HANDS = [Hand.ROCK, Hand.SCISSORS, Hand.PAPER]


def strength(a: Hand, b: Hand) -> Outcome:
    """Judge ``a`` against ``b``.

    Each hand beats the one after it in cyclic order
    Rock -> Scissors -> Paper -> Rock.
    """
    if a is b:
        return Outcome.DRAW
    if (a.value + 1) % 3 == b.value:
        return Outcome.WIN
    return Outcome.LOSE


def from_index(n) -> Hand:
    """Map 0, 1, 2 to Rock, Scissors, Paper.

    Anything else falls back to Rock instead of raising, so decoding a
    hand is a total function.
    """
    if isinstance(n, int) and not isinstance(n, bool) and 0 <= n < 3:
        return HANDS[n]
    return Hand.ROCK
