"""
main.py — Prim Stepper Flask App
================================
JSON API that lets a browser visualizer drive a spanning-tree run one
edge at a time.

Routes:
  GET  /api/algorithms         – registry cards (label, pseudocode, …)
  POST /api/demo               – set graph + start node
  GET  /api/demo               – current graph + start node
  POST /api/run                – record a run on the current demo
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  GET  /api/state              – current step index + state

State management:
  The Flask session holds only the demo, the selected algorithm and the
  displayed step index.  Runs are deterministic, so each request rebuilds
  the recording from the demo instead of storing every Step in the
  session cookie.

Configuration (app.config, overridable via PRIM_STEPPER_* env vars):
  DEFAULT_ALGORITHM  – registry key used when /api/run names none
  MAX_NODES          – most nodes /api/demo accepts
  MAX_EDGES          – most directed edges /api/demo accepts

The demo lives in the signed session cookie and every navigation request
replays the run (O(V · E) per step), so both caps are kept small enough
for the cookie to stay under the ~4 KB browsers accept.
"""

import logging
import secrets
from typing import Optional, Tuple

from flask import Flask, jsonify, request, session

from graph import Demo
from algorithms import AlgorithmError, list_algorithms
from engine import Recorder


logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "DEFAULT_ALGORITHM": "prim",
    "MAX_NODES":         30,
    "MAX_EDGES":         60,
}


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_demo() -> Optional[Demo]:
    if "demo" not in session:
        return None
    return Demo.from_dict(session["demo"])


def get_state() -> dict:
    return {
        "algo":         session.get("algo"),
        "current_step": session.get("current_step", 0),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def error(message: str, status: int = 400) -> Tuple:
    logger.warning("Rejected %s %s: %s", request.method, request.path, message)
    return jsonify({"error": message}), status


def record_run(demo: Demo, algo_key: str) -> Recorder:
    rec = Recorder()
    rec.start(algo_key, demo)
    rec.run_to_completion()
    return rec


def step_payload(rec: Recorder, idx: int) -> dict:
    return {
        "current_step": idx,
        "total_steps":  len(rec.steps),
        "step":         rec.steps[idx].to_dict(),
    }


def current_recording() -> Optional[Recorder]:
    """Rebuild the recording for the session's demo, or None if no run yet."""
    demo  = get_demo()
    state = get_state()
    if demo is None or not state["algo"]:
        return None
    return record_run(demo, state["algo"])


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG, SECRET_KEY=secrets.token_hex(32))
    app.config.from_prefixed_env("PRIM_STEPPER")
    if config:
        app.config.from_mapping(config)

    # -----------------------------------------------------------------
    # API: Algorithms
    # -----------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify({
            "algorithms":   [a.to_dict() for a in list_algorithms()],
            "default":      app.config["DEFAULT_ALGORITHM"],
        })

    # -----------------------------------------------------------------
    # API: Demo (graph + start node)
    # -----------------------------------------------------------------
    @app.route("/api/demo", methods=["POST"])
    def api_demo_set():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return error("Expected a JSON object")
        try:
            demo = Demo.from_dict(data)
        except (KeyError, ValueError, TypeError) as e:
            return error(f"Malformed demo: {e}")

        if demo.graph.node_count() > app.config["MAX_NODES"]:
            return error(f"Graph has more than {app.config['MAX_NODES']} nodes")
        if demo.graph.edge_count() > app.config["MAX_EDGES"]:
            return error(f"Graph has more than {app.config['MAX_EDGES']} edges")

        session["demo"] = demo.to_dict()
        set_state(algo=None, current_step=0)
        return jsonify({"node_ids": demo.graph.node_ids(), "start": demo.start})

    @app.route("/api/demo", methods=["GET"])
    def api_demo_get():
        if "demo" not in session:
            return error("No demo loaded", 404)
        return jsonify(session["demo"])

    # -----------------------------------------------------------------
    # API: Run Algorithm
    # -----------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        demo = get_demo()
        if demo is None:
            return error("Load a demo first")

        data = request.get_json(silent=True) or {}
        algo_key = data.get("algo", app.config["DEFAULT_ALGORITHM"])

        try:
            rec = record_run(demo, algo_key)
        except (AlgorithmError, ValueError) as e:
            return error(str(e))

        set_state(algo=algo_key, current_step=0)
        payload = step_payload(rec, 0)
        payload["metrics"] = rec.metrics.to_dict()
        return jsonify(payload)

    # -----------------------------------------------------------------
    # API: Step Navigation
    # -----------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        rec = current_recording()
        if rec is None:
            return error("Start a run first")
        idx = get_state()["current_step"]
        if idx >= len(rec.steps) - 1:
            return error("Already at last step")
        set_state(current_step=idx + 1)
        return jsonify(step_payload(rec, idx + 1))

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        rec = current_recording()
        if rec is None:
            return error("Start a run first")
        idx = get_state()["current_step"]
        if idx <= 0:
            return error("Already at first step")
        set_state(current_step=idx - 1)
        return jsonify(step_payload(rec, idx - 1))

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        rec = current_recording()
        if rec is None:
            return error("Start a run first")
        data = request.get_json(silent=True) or {}
        idx = data.get("index")
        if not isinstance(idx, int) or not 0 <= idx < len(rec.steps):
            return error("Invalid step index")
        set_state(current_step=idx)
        return jsonify(step_payload(rec, idx))

    @app.route("/api/state")
    def api_state():
        rec = current_recording()
        if rec is None:
            return jsonify({"current_step": 0, "total_steps": 0, "step": None})
        payload = step_payload(rec, get_state()["current_step"])
        payload["metrics"] = rec.metrics.to_dict()
        return jsonify(payload)

    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    logger.info("Prim Stepper API on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
