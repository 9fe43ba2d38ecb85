"""
app.py – Flask application entry point.

Creates the Flask app, attaches the credential store and registers the
route Blueprint from :mod:`routes`.
"""

from __future__ import annotations

import logging
import os

from flask import Flask

from config import CredentialStore
from routes import STORE_EXTENSION_KEY, bp

logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")


def create_app(store: CredentialStore | None = None) -> Flask:
    """Build the Flask application.

    Args:
        store: Credential store to use.  Defaults to one backed by
            :data:`config.CONFIG_FILE`.
    """
    flask_app = Flask(__name__)
    flask_app.extensions[STORE_EXTENSION_KEY] = store or CredentialStore()
    flask_app.register_blueprint(bp)
    return flask_app


app = create_app()


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "5000"))
    app.run(host="0.0.0.0", debug=False, port=port)
