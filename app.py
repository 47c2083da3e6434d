from __future__ import annotations

import logging
import os
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from balloon_core.config import env_int
from game import (
    BalloonGame,
    BalloonError,
    cluster_at,
)

logger = logging.getLogger(__name__)

DEFAULT_ROWS = env_int("BALLOON_ROWS", 5)
DEFAULT_COLS = env_int("BALLOON_COLS", 10)

app = Flask(__name__)


@dataclass
class _Entry:
    game: BalloonGame
    lock: threading.Lock = field(default_factory=threading.Lock)


# One session per game id. The registry lock guards the dict; each entry's
# lock serialises the operations on its game.
_games: Dict[str, _Entry] = {}
_games_lock = threading.Lock()


def state_to_json(game: BalloonGame) -> Dict[str, Any]:
    return {
        "rows": int(game.rows),
        "cols": int(game.cols),
        "grid": game.rows_as_strings(),
        "score": int(game.score()),
        "compact": game.is_compact(),
        "canPop": game.can_pop(),
        "depth": game.moves(),
    }


def _register(game: BalloonGame) -> str:
    game_id = uuid.uuid4().hex
    with _games_lock:
        _games[game_id] = _Entry(game)
    return game_id


def _lookup(game_id: Optional[str]) -> Optional[_Entry]:
    if not game_id:
        return None
    with _games_lock:
        return _games.get(str(game_id))


def _error(message: str, status: int) -> Any:
    return jsonify({"ok": False, "error": message}), status


def _int_field(body: Dict[str, Any], name: str, default: Optional[int] = None) -> int:
    value = body.get(name, default)
    if value is None:
        raise ValueError(f"{name} required")
    return int(value)


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        rows = _int_field(body, "rows", DEFAULT_ROWS)
        cols = _int_field(body, "cols", DEFAULT_COLS)
        seed = body.get("seed", None)
        game = BalloonGame.create(rows, cols, seed=seed)
    except (BalloonError, ValueError, TypeError) as e:
        return _error(str(e), 400)
    game_id = _register(game)
    return jsonify({"ok": True, "id": game_id, "state": state_to_json(game)})


@app.post("/api/new_from")
def api_new_from() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    matrix = body.get("matrix")
    if not isinstance(matrix, list) or not matrix:
        return _error("matrix required", 400)
    try:
        rows_in = [list(str(row)) if isinstance(row, str) else [str(x) for x in row] for row in matrix]
        if any(len(row) != len(rows_in[0]) for row in rows_in):
            return _error("bad matrix: rows differ in length", 400)
        game = BalloonGame.create_from_matrix(rows_in, len(rows_in), len(rows_in[0]))
    except (BalloonError, TypeError) as e:
        return _error(f"bad matrix: {e}", 400)
    game_id = _register(game)
    return jsonify({"ok": True, "id": game_id, "state": state_to_json(game)})


@app.get("/api/state/<game_id>")
def api_state(game_id: str) -> Any:
    entry = _lookup(game_id)
    if entry is None:
        return _error("unknown game", 404)
    with entry.lock:
        state = state_to_json(entry.game)
    return jsonify({"ok": True, "state": state})


@app.post("/api/cluster")
def api_cluster() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    entry = _lookup(body.get("id"))
    if entry is None:
        return _error("unknown game", 404)
    try:
        r, c = _int_field(body, "r"), _int_field(body, "c")
    except (ValueError, TypeError) as e:
        return _error(str(e), 400)
    with entry.lock:
        cells = sorted(cluster_at(entry.game.current, r, c))
    return jsonify({"ok": True, "cells": [[cr, cc] for cr, cc in cells], "poppable": len(cells) >= 2})


@app.post("/api/pop")
def api_pop() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    entry = _lookup(body.get("id"))
    if entry is None:
        return _error("unknown game", 404)
    try:
        r, c = _int_field(body, "r"), _int_field(body, "c")
    except (ValueError, TypeError) as e:
        return _error(str(e), 400)
    with entry.lock:
        popped = entry.game.pop(r, c)
        state = state_to_json(entry.game)
    return jsonify({"ok": True, "popped": popped, "state": state})


@app.post("/api/undo")
def api_undo() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    entry = _lookup(body.get("id"))
    if entry is None:
        return _error("unknown game", 404)
    with entry.lock:
        undone = entry.game.undo()
        state = state_to_json(entry.game)
    return jsonify({"ok": True, "undone": undone, "state": state})


@app.post("/api/float")
def api_float() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    entry = _lookup(body.get("id"))
    if entry is None:
        return _error("unknown game", 404)
    steps = body.get("steps", None)
    count = None
    if steps is not None:
        try:
            count = int(steps)
        except (ValueError, TypeError):
            return _error("steps must be an integer", 400)
    with entry.lock:
        game = entry.game
        if count is None:
            game.float_until_compact()
        else:
            # A board is compact after at most rows - 1 steps.
            for _ in range(min(max(count, 0), game.rows)):
                if game.is_compact():
                    break
                game.float_one_step()
        state = state_to_json(game)
    return jsonify({"ok": True, "state": state})


@app.delete("/api/game/<game_id>")
def api_drop(game_id: str) -> Any:
    with _games_lock:
        entry = _games.pop(game_id, None)
    if entry is None:
        return _error("unknown game", 404)
    logger.debug("dropped game %s", game_id)
    return jsonify({"ok": True})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
