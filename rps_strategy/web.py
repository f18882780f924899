"""Flask JSON API for the Rock-Paper-Scissors strategy simulator."""

import logging

from flask import Flask, request, jsonify

from .engine import run_game, DEFAULT_ROUNDS
from .hand import Hand, strength
from .player import PlayerConfig
from .strategy import STRATEGY_CLASSES
from .tournament import default_entrants, round_robin
from .stats import compute_standings

logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.errorhandler(ValueError)
def handle_value_error(exc):
    return jsonify({"error": str(exc)}), 400


def _int_field(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer")
    return value


def _json_object(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object")
    return value


def _request_data() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return _json_object(data, "request body")


def _player_config(data: dict, key: str, default_name: str, default_strategy: str) -> PlayerConfig:
    data = _json_object(data.get(key, {}), f"'{key}'")
    return PlayerConfig(
        name=str(data.get("name", default_name)),
        strategy=str(data.get("strategy", default_strategy)),
        seed=_int_field(data, "seed", 0),
        hand=Hand.parse(str(data.get("hand", "rock"))),
    )


@app.route("/api/strategies")
def api_strategies():
    return jsonify([cls.name for cls in STRATEGY_CLASSES])


@app.route("/api/strength")
def api_strength():
    hand_a = Hand.parse(request.args.get("a", ""))
    hand_b = Hand.parse(request.args.get("b", ""))
    return jsonify({
        "a": hand_a.label,
        "b": hand_b.label,
        "outcome": strength(hand_a, hand_b).value,
    })


@app.route("/api/game", methods=["POST"])
def api_game():
    data = _request_data()
    config_a = _player_config(data, "player_a", "Player A", "Winning")
    config_b = _player_config(data, "player_b", "Player B", "Probe")
    rounds = _int_field(data, "rounds", DEFAULT_ROUNDS)

    result = run_game(config_a.build(), config_b.build(), rounds=rounds,
                      record_rounds=bool(data.get("record_rounds", False)))
    logger.info("game %s vs %s: %d-%d-%d", result.player_a_name, result.player_b_name,
                result.a_wins, result.b_wins, result.draws)

    payload = {
        "game": result.to_dict(),
        "players": [result.player_a.to_dict(), result.player_b.to_dict()],
    }
    if result.a_hands:
        payload["hands"] = [[a.label, b.label] for a, b in zip(result.a_hands, result.b_hands)]
    return jsonify(payload)


@app.route("/api/tournament", methods=["POST"])
def api_tournament():
    data = _request_data()
    rounds = _int_field(data, "rounds", DEFAULT_ROUNDS)
    seed = _int_field(data, "seed", 0)
    parallel = bool(data.get("parallel", True))

    results = round_robin(default_entrants(seed=seed), rounds=rounds, parallel=parallel)
    standings = compute_standings(results)

    return jsonify({
        "standings": [s.to_dict() for s in standings],
        "games": [r.to_dict() for r in results],
        "total_games": len(results),
    })


def main():
    print("\n🎮 RPS Strategy API")
    print("  → http://localhost:5000/api/strategies\n")
    app.run(debug=True, port=5000)


if __name__ == "__main__":
    main()
