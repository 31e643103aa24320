"""
main.py — Sort Visualizer Flask Host
=====================================
The host process that owns the engine pool and drives it.

Routes:
  GET  /                     – status page (slot table + leaderboard)
  GET  /api/state            – every slot snapshot + leaderboard
  POST /api/tick             – advance the pool ({"time": t?, "ticks": n?})
  GET  /api/slots/<name>     – one slot snapshot
  POST /api/restart          – restart one slot ({"slot": name}) or all
  GET  /api/leaderboard      – ranking (?limit=n) + leader
  GET  /api/algorithms       – registry cards

State management:
  One VisualizerPool and one StatsAggregator per app, created in
  create_app() and kept in app.extensions.  Nothing lives in module
  globals, so tests can build as many independent apps as they like.
"""

import logging
import random
from typing import Callable, Optional

from flask import Flask, render_template_string, request, jsonify, current_app

from sorters import list_sorters
from engine import PoolConfig, StatsAggregator, VisualizerPool, setup_logging


logger = logging.getLogger("sortvis.host")

MAX_TICKS_PER_REQUEST = 1000
LEADERBOARD_SIZE      = 4


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    config: Optional[PoolConfig] = None,
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Flask:
    config = config or PoolConfig.from_env()

    app = Flask(__name__)
    stats = StatsAggregator()
    pool_kwargs = {"stats": stats, "rng": rng}
    if clock is not None:
        pool_kwargs["clock"] = clock
    pool = VisualizerPool.from_config(config, **pool_kwargs)

    app.extensions["sortvis.pool"]   = pool
    app.extensions["sortvis.stats"]  = stats
    app.extensions["sortvis.config"] = config

    _register_routes(app)
    return app


def get_pool() -> VisualizerPool:
    return current_app.extensions["sortvis.pool"]


def get_stats() -> StatsAggregator:
    return current_app.extensions["sortvis.stats"]


def leaderboard_payload(limit: int = LEADERBOARD_SIZE) -> dict:
    stats = get_stats()
    leader, count = stats.leading_algorithm()
    return {
        "leader":  {"kind": leader.value, "label": leader.label, "completions": count},
        "ranking": [e.to_dict() for e in stats.ranking(limit)],
        "total":   stats.total(),
    }


def state_payload() -> dict:
    snaps = get_pool().snapshots()
    return {
        "slots":       {name: s.to_dict() for name, s in snaps.items()},
        "leaderboard": leaderboard_payload(),
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        snaps = get_pool().snapshots()
        return render_template_string(
            INDEX_TEMPLATE,
            slots=list(snaps.values()),
            board=leaderboard_payload(),
        )

    @app.route("/api/state")
    def api_state():
        return jsonify(state_payload())

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        data = request.get_json(silent=True) or {}
        now = data.get("time")
        ticks = data.get("ticks", 1)

        # bool is an int subclass; JSON true/false are not numbers here
        if now is not None and (isinstance(now, bool) or not isinstance(now, (int, float))):
            return jsonify({"error": "time must be a number"}), 400
        if isinstance(ticks, bool) or not isinstance(ticks, int) or not 1 <= ticks <= MAX_TICKS_PER_REQUEST:
            return jsonify({"error": f"ticks must be an integer in 1..{MAX_TICKS_PER_REQUEST}"}), 400

        pool = get_pool()
        restarted = 0
        for _ in range(ticks):
            restarted += pool.tick(now)

        payload = state_payload()
        payload["restarted"] = restarted
        return jsonify(payload)

    @app.route("/api/slots/<name>")
    def api_slot(name):
        pool = get_pool()
        if name not in pool:
            return jsonify({"error": f"Unknown slot: {name}"}), 404
        return jsonify(pool.snapshot(name).to_dict())

    @app.route("/api/restart", methods=["POST"])
    def api_restart():
        data = request.get_json(silent=True) or {}
        slot = data.get("slot")
        pool = get_pool()

        if slot is None:
            pool.restart_all()
            return jsonify({"restarted": pool.names})
        if slot not in pool:
            return jsonify({"error": f"Unknown slot: {slot}"}), 404
        pool.restart(slot)
        return jsonify({"restarted": [slot]})

    @app.route("/api/leaderboard")
    def api_leaderboard():
        limit = request.args.get("limit", LEADERBOARD_SIZE)
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            return jsonify({"error": "limit must be an integer"}), 400
        if limit < 1:
            return jsonify({"error": "limit must be >= 1"}), 400
        return jsonify(leaderboard_payload(limit))

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([
            {
                "kind":             info.kind.value,
                "label":            info.label,
                "complexity_time":  info.complexity_time,
                "complexity_space": info.complexity_space,
                "stable":           info.stable,
                "description":      info.description,
                "pseudocode":       info.pseudocode,
            }
            for info in list_sorters()
        ])


# ---------------------------------------------------------------------------
# HTML template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Sort Visualizer</title>
  <style>
    body  { font-family: monospace; background: #0b0b12; color: #d7d7e4; margin: 2em; }
    table { border-collapse: collapse; margin-bottom: 2em; }
    td, th { padding: 4px 12px; border-bottom: 1px solid #26263a; text-align: left; }
    .running    { color: #6496ff; }
    .completed  { color: #64ff64; }
    .restarting { color: #ff6464; }
  </style>
</head>
<body>
  <h2>Engines</h2>
  <table id="slots">
    <tr><th>slot</th><th>algorithm</th><th>state</th><th>steps</th>
        <th>comparisons</th><th>accesses</th><th>sorted</th></tr>
    {% for s in slots %}
    <tr id="slot-{{ s.name }}">
      <td>{{ s.name }}</td><td>{{ s.label }}</td>
      <td class="{{ s.state.value }}">{{ s.state.value }}</td>
      <td>{{ s.steps }}</td><td>{{ s.comparisons }}</td><td>{{ s.accesses }}</td>
      <td>{{ (s.sorted_fraction * 100) | round(1) }}%</td>
    </tr>
    {% endfor %}
  </table>

  <h2>Leaderboard</h2>
  <table id="board">
    {% for row in board.ranking %}
    <tr><td>{{ row.label }}</td><td>{{ row.completions }}</td></tr>
    {% endfor %}
  </table>

  <script>
    // poll-driven host loop: one tick per animation frame
    async function frame() {
      const res = await fetch('/api/tick', {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify({time: performance.now() / 1000}),
      });
      const data = await res.json();
      for (const [name, s] of Object.entries(data.slots)) {
        const row = document.getElementById('slot-' + name);
        if (!row) continue;
        const cells = row.children;
        cells[2].textContent = s.state;
        cells[2].className = s.state;
        cells[3].textContent = s.steps;
        cells[4].textContent = s.comparisons;
        cells[5].textContent = s.accesses;
        cells[6].textContent = (s.sorted_fraction * 100).toFixed(1) + '%';
      }
      document.getElementById('board').innerHTML = data.leaderboard.ranking
        .map(r => `<tr><td>${r.label}</td><td>${r.completions}</td></tr>`).join('');
      requestAnimationFrame(frame);
    }
    requestAnimationFrame(frame);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def main() -> None:
    config = PoolConfig.from_env()
    setup_logging(config.log_level)
    app = create_app(config)
    print("=" * 60)
    print("  Sort Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    logger.info("slots: %s", ", ".join(app.extensions["sortvis.pool"].names))
    app.run(debug=False, port=5000)


if __name__ == "__main__":
    main()
