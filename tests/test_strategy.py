import pytest

from rps_strategy.hand import Hand
from rps_strategy.strategy import (
    EMPTY_HISTORY,
    ProbeStrategy,
    StrategyState,
    WinningStrategy,
    get_all_strategies,
    get_strategy_by_name,
    lcg_next,
)


def _state(**kwargs):
    base = dict(won=False, prev_hand=Hand.ROCK, history=EMPTY_HISTORY, current_hand_value=0)
    base.update(kwargs)
    return StrategyState(**base)


def test_lcg_step():
    assert lcg_next(0) == 12345
    assert lcg_next(1) == 1103527590
    assert lcg_next(42) == (42 * 1103515245 + 12345) % 2 ** 31


def test_initial_state():
    state = StrategyState.initial(Hand.PAPER)
    assert state.won is False
    assert state.prev_hand is Hand.PAPER
    assert state.current_hand_value == 2
    assert state.history == ((0, 0, 0), (0, 0, 0), (0, 0, 0))


# ---------------------------------------------------------------------------
# Winning
# ---------------------------------------------------------------------------

def test_winning_stays_after_win():
    state = _state(won=True, prev_hand=Hand.PAPER, current_hand_value=2)
    hand, new_state = WinningStrategy(7).decide(state)
    assert hand is Hand.PAPER
    assert new_state == state


def test_winning_after_loss_uses_reseeded_lcg():
    strategy = WinningStrategy(42)
    state = _state(prev_hand=Hand.ROCK)
    expected = ((42 * 1103515245 + 12345) % 2 ** 31) % 3
    for _ in range(5):
        hand, new_state = strategy.decide(state)
        assert hand.value == expected
    assert hand is Hand.ROCK
    assert new_state.prev_hand is hand
    assert new_state.current_hand_value == hand.value


def test_winning_seed_includes_previous_hand():
    hand, _ = WinningStrategy(2).decide(_state(prev_hand=Hand.SCISSORS))
    assert hand.value == lcg_next(3) % 3


def test_winning_learn_records_outcome_only():
    strategy = WinningStrategy(1)
    state = _state()
    assert strategy.learn(True, state).won is True
    assert strategy.learn(False, _state(won=True)).won is False
    assert strategy.learn(True, state).history == EMPTY_HISTORY


# ---------------------------------------------------------------------------
# Probe
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("row", [0, 1, 2])
def test_probe_bootstrap_uses_seed_mod_three(row):
    hand, _ = ProbeStrategy(7).decide(_state(current_hand_value=row))
    assert hand is Hand.SCISSORS


def test_probe_samples_row_by_cumulative_counts():
    history = ((1, 2, 3), (0, 0, 0), (0, 0, 0))
    state = _state(history=history, current_hand_value=0)
    assert ProbeStrategy(0).decide(state)[0] is Hand.ROCK
    assert ProbeStrategy(2).decide(state)[0] is Hand.SCISSORS
    assert ProbeStrategy(4).decide(state)[0] is Hand.PAPER
    # bet = 10 % 6 = 4
    assert ProbeStrategy(10).decide(state)[0] is Hand.PAPER


def test_probe_decide_shifts_current_into_previous():
    state = _state(prev_hand=Hand.ROCK, current_hand_value=2)
    hand, new_state = ProbeStrategy(4).decide(state)
    assert hand is Hand.SCISSORS
    assert new_state.prev_hand is Hand.PAPER
    assert new_state.current_hand_value == 1


def test_probe_learning_asymmetry():
    strategy = ProbeStrategy(0)
    state = _state(prev_hand=Hand.ROCK, current_hand_value=1)

    won = strategy.learn(True, state)
    assert won.history[0] == (0, 1, 0)
    assert won.won is True

    lost = strategy.learn(False, state)
    assert lost.history[0] == (0, 0, 1)
    assert lost.won is False

    # input state is untouched
    assert state.history == EMPTY_HISTORY


def test_probe_loss_wraps_around():
    lost = ProbeStrategy(0).learn(False, _state(prev_hand=Hand.SCISSORS, current_hand_value=2))
    assert lost.history[1] == (1, 0, 0)


def test_probe_out_of_range_row_is_clamped():
    strategy = ProbeStrategy(5)
    state = _state(current_hand_value=9)
    hand, new_state = strategy.decide(state)
    assert hand is Hand.PAPER
    assert new_state.prev_hand is Hand.ROCK

    unchanged = strategy.learn(True, state)
    assert unchanged.history == EMPTY_HISTORY


def test_probe_history_never_decreases():
    strategy = ProbeStrategy(11)
    state = StrategyState.initial(Hand.ROCK)
    previous = state.history
    for i in range(30):
        _, state = strategy.decide(state)
        state = strategy.learn(i % 3 == 0, state)
        for old_row, new_row in zip(previous, state.history):
            assert all(new >= old >= 0 for old, new in zip(old_row, new_row))
        previous = state.history
    assert sum(map(sum, state.history)) == 30


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_get_strategy_by_name():
    strategy = get_strategy_by_name("probe", seed=3)
    assert isinstance(strategy, ProbeStrategy)
    assert strategy.seed == 3
    assert strategy == ProbeStrategy(3)
    with pytest.raises(ValueError, match="Unknown strategy"):
        get_strategy_by_name("Random")


def test_get_all_strategies():
    assert [s.name for s in get_all_strategies()] == ["Winning", "Probe"]
