import os
import tempfile
from pathlib import Path

# Settings and the engine are read at import time, so point them at a scratch
# area before anything from `app` is imported.
_SCRATCH = Path(tempfile.mkdtemp(prefix="winonboard-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_SCRATCH / 'test.db'}"
os.environ["ENVIRONMENT"] = "test"
os.environ["SINGLE_SERVICE"] = "false"
os.environ["UPLOADS_DIR"] = str(_SCRATCH / "uploads")
os.environ["DOCUMENTS_DIR"] = str(_SCRATCH / "documents")
os.environ["ASSETS_DIR"] = str(_SCRATCH / "assets")
os.environ["FRONTEND_BUILD_DIR"] = str(_SCRATCH / "missing-build")
os.environ.pop("ALLOWED_ORIGINS", None)

import pytest  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.database import Base, SessionLocal, engine  # noqa: E402
import app.main  # noqa: E402,F401


@pytest.fixture
def make_settings(tmp_path):
    """Settings with every directory under tmp_path; keyword overrides win"""

    def factory(**overrides) -> Settings:
        values = {
            "ENVIRONMENT": "test",
            "SINGLE_SERVICE": False,
            "ALLOWED_ORIGINS": None,
            "UPLOADS_DIR": str(tmp_path / "uploads"),
            "DOCUMENTS_DIR": str(tmp_path / "documents"),
            "ASSETS_DIR": str(tmp_path / "assets"),
            "FRONTEND_BUILD_DIR": str(tmp_path / "frontend" / "build"),
        }
        values.update(overrides)
        return Settings(**values)

    return factory


@pytest.fixture
def build_dir(tmp_path):
    """A built frontend: entry document plus one hashed bundle"""
    build = tmp_path / "frontend" / "build"
    (build / "static" / "js").mkdir(parents=True)
    (build / "index.html").write_text("<!doctype html><div id=\"root\"></div>")
    (build / "static" / "js" / "main.abc123.js").write_text("console.log('app');")
    return build


@pytest.fixture
def db():
    from app.models import user  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
