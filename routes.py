"""
routes.py – Flask Blueprint containing all HTTP route handlers.

Every route is registered on the ``bp`` Blueprint which is imported and
registered with the Flask application in ``app.py``.  Route handlers are
intentionally thin: they validate inputs, delegate to :mod:`share` and
:mod:`config`, and render or serialise the result.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue

from config import CredentialStore
from share import handle_share

bp = Blueprint("main", __name__)

STORE_EXTENSION_KEY = "credential_store"

MSG_KEY_SAVED = "✅ API Key Saved!"

# Fields a Web Share Target may populate, in the order they are searched
_SHARE_FIELDS: tuple[str, ...] = ("text", "url", "title")


def _store() -> CredentialStore:
    return current_app.extensions[STORE_EXTENSION_KEY]


def _shared_text() -> str:
    """Join the share fields from the query string or form body."""
    values = request.values
    parts = [values.get(name, "").strip() for name in _SHARE_FIELDS]
    return " ".join(p for p in parts if p)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@bp.route("/", methods=["GET"])
def settings_form() -> ResponseReturnValue:
    """Render the API key form, pre-filled with the stored key."""
    return render_template("settings.html", api_key=_store().get() or "", message=None)


@bp.route("/settings", methods=["POST"])
def save_settings() -> ResponseReturnValue:
    """Save the API key submitted from the settings form."""
    api_key = request.form.get("api_key", "")
    try:
        _store().set(api_key)
    except OSError:
        logging.exception("Failed to write config file")
        return (
            render_template("settings.html", api_key=api_key, message="❌ Could not save API Key"),
            500,
        )
    return render_template("settings.html", api_key=api_key, message=MSG_KEY_SAVED)


@bp.route("/api/config", methods=["GET"])
def get_config() -> ResponseReturnValue:
    """Report whether an API key is stored.  The key itself is never returned."""
    return jsonify({"api_key_set": bool(_store().get())})


@bp.route("/api/config", methods=["POST"])
def update_config() -> ResponseReturnValue:
    """Persist the API key supplied as ``{"api_key": "..."}``.

    Returns:
        JSON with ``status`` and ``message``, a 400 error for a malformed
        body, or a 500 error if the config file could not be written.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return (
            jsonify({"status": "error", "message": "Request body must be a JSON object"}),
            400,
        )
    api_key = data.get("api_key")
    if not isinstance(api_key, str):
        return jsonify({"status": "error", "message": "api_key must be a string"}), 400

    try:
        _store().set(api_key)
    except OSError as exc:
        logging.exception("Failed to write config file")
        return (
            jsonify({"status": "error", "message": f"Config file write failed: {exc}"}),
            500,
        )
    return jsonify({"status": "success", "message": MSG_KEY_SAVED})


# ---------------------------------------------------------------------------
# Sharing
# ---------------------------------------------------------------------------


@bp.route("/share", methods=["GET", "POST"])
def share_target() -> ResponseReturnValue:
    """Web Share Target entry point.

    Falls back to the settings form when no key is stored or nothing was
    shared; otherwise renders the one-line outcome.
    """
    result = handle_share(_shared_text(), _store())
    if result.needs_settings:
        return redirect(url_for("main.settings_form"))
    return render_template("result.html", result=result)


@bp.route("/api/share", methods=["POST"])
def api_share() -> ResponseReturnValue:
    """JSON twin of :func:`share_target`.

    Expects ``{"text": "..."}``.

    Returns:
        JSON with ``status``, ``message`` and ``imdb_id``.  409 when no API
        key is stored, 400 when no IMDb ID was found, 502 when the MDBList
        request failed.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"status": "error", "message": "Request body must be JSON"}), 400
    text = data.get("text")
    if text is not None and not isinstance(text, str):
        return jsonify({"status": "error", "message": "text must be a string"}), 400

    result = handle_share(text, _store())
    if result.needs_settings:
        return (
            jsonify(
                {
                    "status": "error",
                    "message": "API key not configured or nothing shared",
                    "needs_settings": True,
                }
            ),
            409,
        )
    if result.success:
        return jsonify({"status": "success", "message": result.message, "imdb_id": result.imdb_id})

    status_code = 400 if result.imdb_id is None else 502
    return (
        jsonify({"status": "error", "message": result.message, "imdb_id": result.imdb_id}),
        status_code,
    )


@bp.route("/manifest.webmanifest", methods=["GET"])
def manifest() -> ResponseReturnValue:
    """Web app manifest registering ``/share`` as a plain-text share target."""
    body = {
        "name": "IMDb to MDBList",
        "short_name": "IMDb2MDBList",
        "start_url": url_for("main.settings_form"),
        "display": "standalone",
        "share_target": {
            "action": url_for("main.share_target"),
            "method": "GET",
            "params": {"title": "title", "text": "text", "url": "url"},
        },
    }
    response = jsonify(body)
    response.mimetype = "application/manifest+json"
    return response
