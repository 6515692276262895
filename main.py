"""
main.py — Graph Algorithm Stepper Flask App
============================================
JSON API over the graph model, the algorithm registry and the playback
engine.  A front-end (canvas, control panel, tables) talks to these
routes; no HTML is rendered here.

Routes:
  GET    /api/graph                        – current graph
  POST   /api/graph/vertex                 – add vertex
  DELETE /api/graph/vertex/<id>            – delete vertex (+ its edges)
  POST   /api/graph/vertex/<id>/rename     – rename vertex
  POST   /api/graph/vertex/<id>/position   – move vertex
  POST   /api/graph/edge                   – add edge / update its weight
  DELETE /api/graph/edge                   – delete edge
  POST   /api/graph/directed               – flip directedness
  POST   /api/graph/clear                  – empty the graph
  GET    /api/graph/representations        – matrix / adjacency list / edge list
  GET    /api/algorithms                   – registry cards
  POST   /api/run                          – materialise a trace
  POST   /api/step/{next,prev,goto,rewind,end,reset,play,tick}
  POST   /api/config/speed                 – playback speed
  GET    /api/state                        – workspace state
  GET    /api/export                       – full recorded run

State management:
  Each browser session gets a Workspace, kept server-side in
  `app.extensions["workspaces"]` and found through the id stored in the
  Flask session.  In-memory only; graphs do not survive a restart.
  The store holds at most MAX_WORKSPACES entries; the least recently
  used workspace is dropped to make room for a new one.

Configuration:
  Defaults below, then FLASK_* environment variables
  (`app.config.from_prefixed_env()`), then the mapping passed to
  `create_app` (tests use this).
"""

import logging
import secrets
from dataclasses import asdict
from typing import Any, Dict, Optional

from flask import Blueprint, Flask, current_app, jsonify, request, session

from graph import Graph
from algorithms import list_algorithms
from engine import Workspace

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=secrets.token_hex(32),
        LOG_LEVEL="INFO",
        DEFAULT_ALGORITHM="bfs",
        DEFAULT_SPEED="medium",
        MAX_WORKSPACES=256,
    )
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)

    app.extensions["workspaces"] = {}
    app.register_blueprint(api)
    logger.info("Graph Algorithm Stepper app created")
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_workspace() -> Workspace:
    """Workspace of the current session, created on first use."""
    store: Dict[str, Workspace] = current_app.extensions["workspaces"]
    ws = store.pop(session.get("workspace_id", ""), None)
    if ws is not None:
        store[ws.workspace_id] = ws      # most recently used goes last
    else:
        limit = max(1, int(current_app.config["MAX_WORKSPACES"]))
        while len(store) >= limit:
            evicted = store.pop(next(iter(store)))
            logger.info("Evicted idle workspace %s", evicted.workspace_id)
        ws = Workspace(
            algo_key=current_app.config["DEFAULT_ALGORITHM"],
            speed=current_app.config["DEFAULT_SPEED"],
        )
        store[ws.workspace_id] = ws
        session["workspace_id"] = ws.workspace_id
    return ws


def body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value).strip()


def number(data: Dict[str, Any], key: str, default: float) -> float:
    """Numeric field of a request body; missing or null means `default`."""
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        try:
            value = float(value)
        except TypeError:
            raise ValueError(f"{key} must be a number") from None
    return value


def error(message: str, status: int = 400):
    logger.warning("Rejected %s %s: %s", request.method, request.path, message)
    return jsonify({"error": message}), status


def step_payload(ws: Workspace) -> Dict[str, Any]:
    step = ws.stepper.current_step
    return {
        "current_step": ws.stepper.current_idx,
        "total_steps":  ws.stepper.total_steps,
        "state":        ws.stepper.state.value,
        "step":         step.to_dict() if step else None,
    }


@api.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    return error(str(exc))


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@api.route("/graph", methods=["GET"])
def api_graph():
    return jsonify(get_workspace().graph.to_dict())


@api.route("/graph/vertex", methods=["POST"])
def api_vertex_add():
    data = body()
    vid = text(data, "id")
    if not vid:
        return error("Vertex id is required")

    ws = get_workspace()
    ws.invalidate_trace()
    vertex = ws.graph.add_vertex(vid, number(data, "x", 0.0), number(data, "y", 0.0))
    if vertex is None:
        return error(f"Vertex {Graph.normalize_id(vid)} already exists", 409)
    return jsonify(vertex.to_dict()), 201


@api.route("/graph/vertex/<vid>", methods=["DELETE"])
def api_vertex_delete(vid: str):
    ws = get_workspace()
    ws.invalidate_trace()
    ws.graph.delete_vertex(vid)
    return jsonify(ws.graph.to_dict())


@api.route("/graph/vertex/<vid>/rename", methods=["POST"])
def api_vertex_rename(vid: str):
    new_id = text(body(), "new_id")
    if not new_id:
        return error("New vertex id is required")

    ws = get_workspace()
    if not ws.graph.has_vertex(vid):
        return error(f"Vertex {Graph.normalize_id(vid)} does not exist", 404)
    ws.invalidate_trace()
    if not ws.graph.rename_vertex(vid, new_id):
        return error(f"Vertex {Graph.normalize_id(new_id)} already exists", 409)
    return jsonify(ws.graph.to_dict())


@api.route("/graph/vertex/<vid>/position", methods=["POST"])
def api_vertex_position(vid: str):
    data = body()
    ws = get_workspace()
    ws.graph.update_vertex_position(vid, number(data, "x", 0.0), number(data, "y", 0.0))
    vertex = ws.graph.get_vertex(vid)
    if vertex is None:
        return error(f"Vertex {Graph.normalize_id(vid)} does not exist", 404)
    return jsonify(vertex.to_dict())


@api.route("/graph/edge", methods=["POST"])
def api_edge_add():
    data = body()
    src = text(data, "source")
    tgt = text(data, "target")
    if not src or not tgt:
        return error("Both source and target are required")

    ws = get_workspace()
    ws.invalidate_trace()
    edge = ws.graph.add_edge(src, tgt, number(data, "weight", 1))
    return jsonify(edge.to_dict()), 201


@api.route("/graph/edge", methods=["DELETE"])
def api_edge_delete():
    data = body()
    ws = get_workspace()
    ws.invalidate_trace()
    ws.graph.delete_edge(text(data, "source"), text(data, "target"))
    return jsonify(ws.graph.to_dict())


@api.route("/graph/directed", methods=["POST"])
def api_graph_directed():
    ws = get_workspace()
    ws.invalidate_trace()
    ws.graph.set_directed(bool(body().get("directed", False)))
    return jsonify(ws.graph.to_dict())


@api.route("/graph/clear", methods=["POST"])
def api_graph_clear():
    ws = get_workspace()
    ws.invalidate_trace()
    ws.graph.clear()
    return jsonify(ws.graph.to_dict())


@api.route("/graph/representations", methods=["GET"])
def api_graph_representations():
    return jsonify(get_workspace().graph.representations().to_dict())


# ---------------------------------------------------------------------------
# API: Algorithms & runs
# ---------------------------------------------------------------------------
@api.route("/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify([a.to_dict() for a in list_algorithms()])


@api.route("/run", methods=["POST"])
def api_run():
    data = body()
    ws = get_workspace()
    metrics = ws.run(
        algo_key=data.get("algorithm"),
        source=data.get("source"),
        target=data.get("target"),
    )
    payload = step_payload(ws)
    payload["metrics"] = asdict(metrics)
    return jsonify(payload)


@api.route("/export", methods=["GET"])
def api_export():
    ws = get_workspace()
    if ws.recorder is None:
        return error("Nothing has been run yet", 404)
    return jsonify(ws.recorder.export())


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@api.route("/step/next", methods=["POST"])
def api_step_next():
    ws = get_workspace()
    if not ws.stepper.next_step():
        return error("Already at last step")
    return jsonify(step_payload(ws))


@api.route("/step/prev", methods=["POST"])
def api_step_prev():
    ws = get_workspace()
    if not ws.stepper.prev_step():
        return error("Already at first step")
    return jsonify(step_payload(ws))


@api.route("/step/goto", methods=["POST"])
def api_step_goto():
    ws = get_workspace()
    idx = body().get("index", 0)
    if isinstance(idx, bool) or not isinstance(idx, int) or not ws.stepper.goto_step(idx):
        return error("Invalid step index")
    return jsonify(step_payload(ws))


@api.route("/step/rewind", methods=["POST"])
def api_step_rewind():
    ws = get_workspace()
    ws.stepper.rewind()
    return jsonify(step_payload(ws))


@api.route("/step/end", methods=["POST"])
def api_step_end():
    ws = get_workspace()
    ws.stepper.jump_to_end()
    return jsonify(step_payload(ws))


@api.route("/step/reset", methods=["POST"])
def api_step_reset():
    ws = get_workspace()
    ws.invalidate_trace()
    return jsonify(step_payload(ws))


@api.route("/step/play", methods=["POST"])
def api_step_play():
    ws = get_workspace()
    ws.stepper.toggle_play()
    return jsonify({"is_playing": ws.stepper.is_playing})


@api.route("/step/tick", methods=["POST"])
def api_step_tick():
    ws = get_workspace()
    advanced = ws.stepper.tick()
    payload = step_payload(ws)
    payload["advanced"] = advanced
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Config & state
# ---------------------------------------------------------------------------
@api.route("/config/speed", methods=["POST"])
def api_config_speed():
    ws = get_workspace()
    speed = body().get("speed")
    ws.set_speed(current_app.config["DEFAULT_SPEED"] if speed is None else speed)
    return jsonify({"speed": ws.stepper.speed})


@api.route("/state", methods=["GET"])
def api_state():
    return jsonify(get_workspace().state())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app = create_app()
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph Algorithm Stepper: open http://localhost:5000/api/state")
    app.run(debug=app.config.get("DEBUG", False))
