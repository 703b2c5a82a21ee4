"""
Flask Calculator Application

Serves the calculator page and a JSON API the page posts button presses to.
Each browser session gets its own engine, keyed by an id kept in the signed
session cookie.
"""

import logging

from flask import Flask, jsonify, render_template, request, session

from . import config
from .sessions import drop_session, get_or_create

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["SECRET_KEY"] = config.SECRET_KEY


def _current_engine():
    session_id, engine = get_or_create(session.get("calculator_id"))
    if session.get("calculator_id") != session_id:
        logger.info("Started calculator session %s", session_id)
        session["calculator_id"] = session_id
    return engine


def _state_response(engine, display: str):
    return jsonify({"display": display, "state": engine.snapshot()})


@app.route("/")
def index():
    """Render the main calculator page."""
    engine = _current_engine()
    return render_template("index.html", display=engine.display)


@app.route("/api/press", methods=["POST"])
def press():
    """
    Handle a single button press.

    Expected JSON payload:
        {"button": "7" | "decimal" | "add" | "equals" | "sqrt" | ...}

    Returns:
        {
            "display": "...",
            "state": {
                "current_input": "...",
                "previous_input": "..." | null,
                "operator": "add|subtract|multiply|divide" | null,
                "should_reset_display": false,
                "last_action_was_operator": false
            }
        }
    """
    data = request.get_json(silent=True)

    if not data:
        return jsonify({"error": "No JSON data provided"}), 400

    button = data.get("button")
    if not isinstance(button, str) or not button:
        return jsonify({"error": "button is required"}), 400

    engine = _current_engine()
    display = engine.press(button)
    return _state_response(engine, display)


@app.route("/api/clear", methods=["POST"])
def clear():
    """Reset the session's calculator to its initial state."""
    engine = _current_engine()
    display = engine.press("clear")
    return _state_response(engine, display)


@app.route("/api/state", methods=["GET"])
def get_state():
    """Return the current display and state without changing anything."""
    engine = _current_engine()
    return _state_response(engine, engine.display)


@app.route("/api/session", methods=["DELETE"])
def end_session():
    """Discard the session's engine; the next request starts from zero."""
    session_id = session.pop("calculator_id", None)
    if not session_id or not drop_session(session_id):
        return jsonify({"error": "No active session"}), 404
    logger.info("Ended calculator session %s", session_id)
    return jsonify({"ok": True})
