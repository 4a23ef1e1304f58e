import os
import shutil
import tempfile

import pytest

from ayyavu.core.database import Database
from ayyavu.modules.projects.repository import ProjectRepository
from ayyavu.server import create_app


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test databases and uploads, cleaned up after."""
    d = tempfile.mkdtemp(prefix="ayyavu-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_dir):
    """Fully initialised app backed by a fresh seeded database."""
    return create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DB_DIR": tmp_dir,
        "PORTFOLIO_DB": os.path.join(tmp_dir, "construction.db"),
        "UPLOAD_FOLDER": os.path.join(tmp_dir, "uploads"),
        "ADMIN_USERNAME": "admin",
        "ADMIN_PASSWORD": "admin123",
        "SEED_SAMPLE_PROJECTS": True,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """Test client holding a live admin session."""
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return client


@pytest.fixture
def repository(tmp_dir):
    """Empty repository with no Flask app around it."""
    db_path = os.path.join(tmp_dir, "repo.db")
    Database.init_schema(db_path)
    return ProjectRepository(db_path)
