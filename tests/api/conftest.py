from __future__ import annotations

import pytest

from src.school_admin.school_admin.main import create_app


@pytest.fixture
def app(tmp_path):
    return create_app("config.testing", UPLOAD_FOLDER=str(tmp_path / "uploads"))


@pytest.fixture
def client(app):
    return app.test_client()
