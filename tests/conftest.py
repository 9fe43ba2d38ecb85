import pytest
from unittest.mock import MagicMock

from app import app as flask_app
from config import CredentialStore


@pytest.fixture
def temp_config(tmp_path):
    """Fixture to provide a temporary configuration file."""
    test_config_dir = tmp_path / "config"
    test_config_dir.mkdir()
    test_config_file = test_config_dir / "config.json"

    # Mock CONFIG_FILE in config module
    import config
    original_config_file = config.CONFIG_FILE
    original_config_dir = config.CONFIG_DIR

    config.CONFIG_FILE = str(test_config_file)
    config.CONFIG_DIR = str(test_config_dir)

    yield test_config_file

    # Restore original paths
    config.CONFIG_FILE = original_config_file
    config.CONFIG_DIR = original_config_dir


@pytest.fixture
def store(temp_config):
    return CredentialStore()


@pytest.fixture
def app(temp_config):
    flask_app.config.update({
        "TESTING": True,
    })

    with flask_app.app_context():
        yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mdblist_response():
    """Build a fake ``requests`` response for the MDBList API."""
    def _make(status_code=200, body=None):
        resp = MagicMock()
        resp.status_code = status_code
        if isinstance(body, Exception):
            resp.json.side_effect = body
        else:
            resp.json.return_value = body if body is not None else {}
        return resp
    return _make
