"""Export game results to JSON or CSV."""

import json
import csv
from pathlib import Path
from .engine import GameResult
from .stats import compute_standings


def export_json(results: list[GameResult], path: str):
    """Export games, final player states and standings to a JSON file."""
    standings = compute_standings(results)

    games = []
    for r in results:
        game = r.to_dict()
        if r.player_a is not None and r.player_b is not None:
            game["final_players"] = [r.player_a.to_dict(), r.player_b.to_dict()]
        games.append(game)

    data = {
        "games": games,
        "standings": [s.to_dict() for s in standings],
    }

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w") as f:
        json.dump(data, f, indent=2)
    print(f"  ✓ Results exported to {out}")


def export_csv(results: list[GameResult], path: str):
    """Export standings to a CSV file."""
    standings = compute_standings(results)

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "rank", "name", "strategy", "score", "games_played",
        "game_wins", "game_losses", "game_draws",
        "round_wins", "round_losses", "round_draws",
        "round_win_pct",
    ]

    with open(out, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for i, standing in enumerate(standings, 1):
            row = standing.to_dict()
            row["rank"] = i
            writer.writerow(row)
    print(f"  ✓ Standings exported to {out}")
