"""Standings computation and pretty-printing for games."""

from dataclasses import dataclass

from .engine import GameResult, HAND_COMPARISONS, judge
from .player import Player


@dataclass
class Standing:
    """Aggregated results for one player name across several games."""
    name: str
    strategy: str = ""
    games_played: int = 0
    game_wins: int = 0
    game_losses: int = 0
    game_draws: int = 0
    round_wins: int = 0
    round_losses: int = 0
    round_draws: int = 0

    @property
    def score(self) -> int:
        """3 points for a game win, 1 for a draw, 0 for a loss."""
        return self.game_wins * 3 + self.game_draws

    @property
    def win_pct(self) -> float:
        total = self.round_wins + self.round_losses + self.round_draws
        return (self.round_wins / total * 100) if total else 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "strategy": self.strategy,
            "score": self.score,
            "games_played": self.games_played,
            "game_wins": self.game_wins,
            "game_losses": self.game_losses,
            "game_draws": self.game_draws,
            "round_wins": self.round_wins,
            "round_losses": self.round_losses,
            "round_draws": self.round_draws,
            "round_win_pct": round(self.win_pct, 2),
        }


def compute_standings(results: list[GameResult]) -> list[Standing]:
    """Build standings sorted by score, then round win %."""
    entries: dict[str, Standing] = {}

    for r in results:
        for name, strategy in [(r.player_a_name, r.strategy_a_name),
                               (r.player_b_name, r.strategy_b_name)]:
            if name not in entries:
                entries[name] = Standing(name=name, strategy=strategy)

        sa = entries[r.player_a_name]
        sb = entries[r.player_b_name]

        sa.round_wins += r.a_wins
        sa.round_losses += r.b_wins
        sa.round_draws += r.draws
        sa.games_played += 1

        sb.round_wins += r.b_wins
        sb.round_losses += r.a_wins
        sb.round_draws += r.draws
        sb.games_played += 1

        if r.a_wins > r.b_wins:
            sa.game_wins += 1
            sb.game_losses += 1
        elif r.b_wins > r.a_wins:
            sb.game_wins += 1
            sa.game_losses += 1
        else:
            sa.game_draws += 1
            sb.game_draws += 1

    return sorted(entries.values(), key=lambda s: (-s.score, -s.win_pct, s.name))


# ---------------------------------------------------------------------------
# Pretty-printing
# ---------------------------------------------------------------------------

def print_player(player: Player):
    """Print a player's won/lost/total counts."""
    print(f"  {player.name} ({player.strategy.name}, seed={player.strategy.seed})")
    print(f"    won: {player.win_count}  lost: {player.lose_count}  "
          f"drawn: {player.draw_count}  total: {player.game_count}  "
          f"({player.win_rate:.1f}%)")


def print_hand_comparisons():
    """Print the fixed hand-vs-hand comparisons."""
    print("  Hand comparisons:")
    for hand_a, hand_b in HAND_COMPARISONS:
        print(f"    {judge(hand_a, hand_b)}")


def print_game_summary(result: GameResult):
    """Print a detailed summary of a single game."""
    print("=" * 60)
    print(f"  {result.player_a_name} ({result.strategy_a_name})  vs  "
          f"{result.player_b_name} ({result.strategy_b_name})")
    print(f"  Rounds: {result.rounds}")
    print("=" * 60)
    print(f"  {'':20s} {'A':>10s} {'B':>10s}")
    print(f"  {'Wins':20s} {result.a_wins:>10d} {result.b_wins:>10d}")
    print(f"  {'Losses':20s} {result.b_wins:>10d} {result.a_wins:>10d}")
    print(f"  {'Draws':20s} {result.draws:>10d} {result.draws:>10d}")
    print(f"  {'Win %':20s} {result.a_win_pct:>9.1f}% {result.b_win_pct:>9.1f}%")
    if result.a_hands:
        print()
        print(f"  A hand distribution: {result.a_hand_distribution}")
        print(f"  B hand distribution: {result.b_hand_distribution}")
    print(f"\n  ★ Winner: {result.winner}")
    print("=" * 60)


def print_standings(standings: list[Standing]):
    """Print a formatted standings table."""
    print()
    print("=" * 86)
    print(f"  {'#':>3s}  {'Player':<20s} {'Strategy':<10s} {'Score':>6s} {'GW':>4s} {'GL':>4s} {'GD':>4s} "
          f"{'RndW':>6s} {'RndL':>6s} {'RndD':>6s} {'Win%':>7s}")
    print("-" * 86)
    for i, s in enumerate(standings, 1):
        print(f"  {i:>3d}  {s.name:<20s} {s.strategy:<10s} {s.score:>6d} {s.game_wins:>4d} "
              f"{s.game_losses:>4d} {s.game_draws:>4d} "
              f"{s.round_wins:>6d} {s.round_losses:>6d} {s.round_draws:>6d} "
              f"{s.win_pct:>6.1f}%")
    print("=" * 86)
    print(f"  GW=Game Wins  GL=Game Losses  GD=Game Draws")
    print(f"  Score = GW×3 + GD×1")
    print()
