from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    Board,
    Card,
    Location,
    LocationKind,
    Session,
    Suit,
    attempt_move,
    auto_move,
    deal_board,
    handle_click,
    is_won,
    num_movable,
    validate_board,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------- JSON codec ----------

def card_to_json(c: Card) -> Dict[str, Any]:
    return {"rank": int(c.rank), "suit": c.suit.value}


def json_to_card(obj: Dict[str, Any]) -> Card:
    return Card(rank=int(obj["rank"]), suit=Suit(str(obj["suit"])))


def loc_to_json(loc: Optional[Location]) -> Optional[Dict[str, Any]]:
    if loc is None:
        return None
    return {"kind": loc.kind.value, "index": int(loc.index)}


def json_to_loc(obj: Any) -> Location:
    if isinstance(obj, str):
        return Location.parse(obj)
    return Location(LocationKind(str(obj["kind"])), int(obj["index"])).check()


def _piles_to_json(piles) -> List[List[Dict[str, Any]]]:
    return [[card_to_json(c) for c in pile] for pile in piles]


def state_to_json(b: Board) -> Dict[str, Any]:
    """Each pile is listed top card first."""
    return {
        "cells": _piles_to_json(b.cells),
        "foundations": _piles_to_json(b.foundations),
        "stacks": _piles_to_json(b.stacks),
    }


def json_to_state(obj: Dict[str, Any]) -> Board:
    def piles(key: str):
        return tuple(tuple(json_to_card(c) for c in pile) for pile in obj[key])

    board = Board(cells=piles("cells"), foundations=piles("foundations"), stacks=piles("stacks"))
    return validate_board(board)


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _bad_request(e: Exception) -> Any:
    return jsonify({"ok": False, "error": f"bad request: {e}"}), 400


# ---------- Game APIs ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    seed = body.get("seed", None)
    if seed is not None and not isinstance(seed, (int, str)):
        return jsonify({"ok": False, "error": "seed must be an integer or a string"}), 400
    board = deal_board(seed=seed)
    return jsonify({"ok": True, "state": state_to_json(board), "won": False})


@app.post("/api/movable")
def api_movable() -> Any:
    body = _json_body()
    try:
        board = json_to_state(body["state"])
        src = json_to_loc(body["src"])
        dst = json_to_loc(body["dst"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "n": num_movable(board, src, dst)})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    try:
        board = json_to_state(body["state"])
        src = json_to_loc(body["src"])
        dst = json_to_loc(body["dst"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    auto = body.get("auto", True)
    if not isinstance(auto, bool):
        return jsonify({"ok": False, "error": "auto must be a boolean"}), 400
    next_board, n = attempt_move(board, src, dst, auto=auto)
    if n == 0:
        return jsonify({"ok": False, "error": "Illegal move", "src": loc_to_json(src)}), 400
    logger.info(f"Moved {n} card(s) from {src} to {dst}")
    return jsonify({
        "ok": True,
        "moved": n,
        "state": state_to_json(next_board),
        "won": is_won(next_board),
    })


@app.post("/api/auto")
def api_auto() -> Any:
    body = _json_body()
    try:
        board = json_to_state(body["state"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    next_board = auto_move(board)
    return jsonify({"ok": True, "state": state_to_json(next_board), "won": is_won(next_board)})


@app.post("/api/click")
def api_click() -> Any:
    body = _json_body()
    try:
        board = json_to_state(body["state"])
        selected_in = body.get("selected")
        selected = json_to_loc(selected_in) if selected_in is not None else None
        loc = json_to_loc(body["loc"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    session = handle_click(Session(board=board, selected=selected), loc)
    return jsonify({
        "ok": True,
        "state": state_to_json(session.board),
        "selected": loc_to_json(session.selected),
        "illegalSrc": loc_to_json(session.illegal_src),
        "won": session.won,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("FREECELL_LOG_LEVEL", "WARNING").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
