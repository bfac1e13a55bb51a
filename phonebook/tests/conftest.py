import sys
from pathlib import Path

import pytest
from flask_jwt_extended import create_access_token

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonebook import create_app
from phonebook.extensions import db
from phonebook.core.auth import models as auth_models  # noqa: F401
from phonebook.core.users.models import User
from phonebook.domains.contacts.models import contact_models  # noqa: F401


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """Per-test app bound to a fresh in-memory SQLite database."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _make(number: str) -> User:
        user = User(number=number)
        db.session.add(user)
        db.session.commit()
        return user

    return _make


@pytest.fixture()
def owner(make_user):
    return make_user("+46701234567")


@pytest.fixture()
def auth_headers(app, owner):
    """JWT headers for API calls."""
    token = create_access_token(identity=owner.key)
    return {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}
