from rps_strategy.hand import Hand
from rps_strategy.player import Player, PlayerConfig, new_player
from rps_strategy.strategy import ProbeStrategy, StrategyState, WinningStrategy


def test_new_player_starts_fresh():
    player = new_player("Taro", WinningStrategy(314), Hand.SCISSORS)
    assert player.state == StrategyState.initial(Hand.SCISSORS)
    assert (player.win_count, player.lose_count, player.game_count) == (0, 0, 0)
    assert player.win_rate == 0.0


def test_next_hand_advances_state_but_not_counters():
    player = new_player("Hana", ProbeStrategy(4), Hand.PAPER)
    hand = player.next_hand()
    assert hand is Hand.SCISSORS
    assert player.state.current_hand_value == 1
    assert player.state.prev_hand is Hand.PAPER
    assert player.game_count == 0


def test_win_lose_draw_counters():
    player = new_player("Taro", WinningStrategy(1))
    player.next_hand()
    player.win()
    assert player.state.won is True
    player.next_hand()
    player.lose()
    assert player.state.won is False
    player.next_hand()
    player.draw()

    assert player.win_count == 1
    assert player.lose_count == 1
    assert player.draw_count == 1
    assert player.game_count == 3
    assert player.game_count == player.win_count + player.lose_count + player.draw_count


def test_draw_does_not_teach_strategy():
    player = new_player("Hana", ProbeStrategy(0))
    player.next_hand()
    before = player.state
    player.draw()
    assert player.state == before


def test_win_rate():
    player = Player(name="p", strategy=WinningStrategy(0), win_count=1, lose_count=3, game_count=4)
    assert player.win_rate == 25.0


def test_players_do_not_share_state():
    a = new_player("a", ProbeStrategy(1))
    b = new_player("b", ProbeStrategy(1))
    a.next_hand()
    a.win()
    assert b.state.history == StrategyState.initial().history
    assert a.state.history != b.state.history


def test_player_config_build():
    config = PlayerConfig(name="Hana", strategy="probe", seed=15, hand=Hand.PAPER)
    player = config.build(seed_offset=2)
    assert player.name == "Hana"
    assert player.strategy == ProbeStrategy(17)
    assert player.state.prev_hand is Hand.PAPER
    assert config.to_dict()["hand"] == "Paper"


def test_to_dict():
    player = new_player("Taro", WinningStrategy(314))
    data = player.to_dict()
    assert data["strategy"] == "Winning"
    assert data["seed"] == 314
    assert data["state"]["prev_hand"] == "Rock"
    assert data["game_count"] == 0
