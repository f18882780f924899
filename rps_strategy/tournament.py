"""Batches of independent games: head-to-head series and round-robin.

Games share no state, so a batch can run on a ProcessPoolExecutor.
Supports an optional on_game_done callback for progress tracking.
"""

import logging
import os
from typing import Optional, Callable
from concurrent.futures import ProcessPoolExecutor, as_completed

from .engine import run_game, GameResult, DEFAULT_ROUNDS
from .hand import HANDS
from .player import PlayerConfig
from .strategy import STRATEGY_CLASSES

logger = logging.getLogger(__name__)

Job = tuple[PlayerConfig, PlayerConfig, int, int]


# ---------------------------------------------------------------------------
# Worker function for parallel execution (must be top-level for pickling)
# ---------------------------------------------------------------------------

def _run_game_worker(
    config_a: PlayerConfig,
    config_b: PlayerConfig,
    rounds: int,
    seed_offset: int = 0,
    record_rounds: bool = False,
) -> GameResult:
    """Build fresh players from their configs and play one game."""
    player_a = config_a.build(seed_offset)
    player_b = config_b.build(seed_offset)
    return run_game(player_a, player_b, rounds=rounds, record_rounds=record_rounds)


def default_entrants(seed: int = 0) -> list[PlayerConfig]:
    """One entrant per strategy and starting hand."""
    entrants = []
    for i, cls in enumerate(STRATEGY_CLASSES):
        for j, hand in enumerate(HANDS):
            entrants.append(PlayerConfig(
                name=f"{cls.name}-{hand.label}",
                strategy=cls.name,
                seed=seed + i * len(HANDS) + j,
                hand=hand,
            ))
    return entrants


# ---------------------------------------------------------------------------
# Batch modes
# ---------------------------------------------------------------------------

def head_to_head(
    config_a: PlayerConfig,
    config_b: PlayerConfig,
    rounds: int = DEFAULT_ROUNDS,
    games: int = 1,
    record_rounds: bool = True,
) -> list[GameResult]:
    """Play ``games`` independent games between two configs.

    Game ``i`` offsets both seeds by ``i``; game 0 uses the seeds as given.
    """
    return [
        _run_game_worker(config_a, config_b, rounds, i, record_rounds)
        for i in range(games)
    ]


def round_robin(
    configs: Optional[list[PlayerConfig]] = None,
    rounds: int = DEFAULT_ROUNDS,
    parallel: bool = True,
    on_game_done: Optional[Callable[[int, int, GameResult], None]] = None,
) -> list[GameResult]:
    """Every config plays every other config once.

    Args:
        parallel: If True, run games across multiple CPU cores.
        on_game_done: Optional callback(completed, total, result) called
                      after each game finishes.
    """
    if configs is None:
        configs = default_entrants()

    names = [c.name for c in configs]
    if len(set(names)) != len(names):
        raise ValueError("entrant names must be unique")

    jobs: list[Job] = []
    for i in range(len(configs)):
        for j in range(i + 1, len(configs)):
            jobs.append((configs[i], configs[j], rounds, 0))

    logger.info("round robin: %d entrants, %d games, %d rounds each",
                len(configs), len(jobs), rounds)

    if parallel and len(jobs) > 1:
        results = _run_parallel(jobs, on_game_done=on_game_done)
    else:
        results = []
        for i, (config_a, config_b, rds, offset) in enumerate(jobs):
            result = _run_game_worker(config_a, config_b, rds, offset)
            results.append(result)
            if on_game_done:
                on_game_done(i + 1, len(jobs), result)

    logger.info("round robin finished: %d games played", len(results))
    return results


# ---------------------------------------------------------------------------
# Parallel execution helper
# ---------------------------------------------------------------------------

def _run_parallel(
    jobs: list[Job],
    on_game_done: Optional[Callable[[int, int, GameResult], None]] = None,
) -> list[GameResult]:
    """Run a batch of games in parallel using ProcessPoolExecutor.

    Results come back in job order regardless of completion order.
    """
    max_workers = min(os.cpu_count() or 4, len(jobs))
    total = len(jobs)

    results: list[Optional[GameResult]] = [None] * total
    completed = 0

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        future_to_idx = {}
        for idx, (config_a, config_b, rounds, offset) in enumerate(jobs):
            future = executor.submit(_run_game_worker, config_a, config_b, rounds, offset)
            future_to_idx[future] = idx

        for future in as_completed(future_to_idx):
            idx = future_to_idx[future]
            result = future.result()
            results[idx] = result
            completed += 1

            if on_game_done:
                on_game_done(completed, total, result)

    return results  # type: ignore[return-value]
