from rps_strategy.engine import GameResult
from rps_strategy.player import new_player
from rps_strategy.stats import (
    compute_standings,
    print_game_summary,
    print_hand_comparisons,
    print_player,
    print_standings,
)
from rps_strategy.strategy import WinningStrategy


def _result(a, b, a_wins, b_wins, draws):
    return GameResult(player_a_name=a, player_b_name=b, strategy_a_name="Winning",
                      strategy_b_name="Probe", rounds=a_wins + b_wins + draws,
                      a_wins=a_wins, b_wins=b_wins, draws=draws)


def test_compute_standings():
    results = [
        _result("x", "y", 6, 3, 1),
        _result("y", "z", 5, 5, 0),
        _result("x", "z", 2, 7, 1),
    ]
    standings = {s.name: s for s in compute_standings(results)}

    assert standings["x"].game_wins == 1
    assert standings["x"].game_losses == 1
    assert standings["x"].round_wins == 8
    assert standings["x"].round_losses == 10
    assert standings["y"].game_draws == 1
    assert standings["z"].score == 4
    assert standings["y"].games_played == 2


def test_standings_order():
    standings = compute_standings([_result("x", "y", 6, 3, 1)])
    assert [s.name for s in standings] == ["x", "y"]
    assert standings[0].to_dict()["score"] == 3


def test_printing(capsys):
    player = new_player("Taro", WinningStrategy(314))
    print_player(player)
    print_hand_comparisons()
    print_game_summary(_result("x", "y", 6, 3, 1))
    print_standings(compute_standings([_result("x", "y", 6, 3, 1)]))
    out = capsys.readouterr().out
    assert "won: 0  lost: 0" in out
    assert "Rock vs Scissors: Rock wins" in out
    assert "Winner: x" in out
