import shutil
from datetime import datetime
from pathlib import Path
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from media_cleaner.config import settings
from media_cleaner.database import Base, get_db
from media_cleaner.main import app
from media_cleaner.models.post import Post
from media_cleaner.models.user import User
from media_cleaner.services import transient_service

TEST_DB_URL = "sqlite:///./test_media_cleaner.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    transient_service.clear_transients()
    yield
    transient_service.clear_transients()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upload_root(monkeypatch):
    test_upload_dir = Path("test_uploads_runtime") / uuid4().hex / "uploads"
    test_upload_dir.mkdir(parents=True, exist_ok=True)
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(test_upload_dir))
    yield test_upload_dir
    shutil.rmtree(test_upload_dir.parent.parent, ignore_errors=True)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(emp_id="admin001", name="Admin", role="admin", department="Web"),
        "editor": User(emp_id="editor001", name="Editor", role="editor", department="Content"),
        "viewer": User(emp_id="viewer001", name="Viewer", role="viewer", department="Biz"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def make_attachment(db, post_id, created_at, parent=0, file_path=None, mime_type="image/png",
                    status="inherit", upload_root=None):
    file_path = file_path or f"2026/01/media-{post_id}.png"
    if upload_root is not None:
        abs_path = Path(upload_root) / file_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        abs_path.write_bytes(b"test")
    post = Post(
        post_id=post_id,
        post_type="attachment",
        post_status=status,
        post_parent=parent,
        title=f"media-{post_id}",
        file_path=file_path,
        mime_type=mime_type,
        created_at=created_at,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


@pytest.fixture
def seed_media(db, upload_root):
    """10, 11, 12는 고아, 20, 21은 부모가 있는 첨부 파일."""
    parent = Post(post_id=1, post_type="post", post_status="publish", title="Parent")
    db.add(parent)
    db.commit()
    records = {}
    for post_id, day, parent_id in [(10, 1, 0), (11, 2, 0), (12, 3, 0), (20, 4, 1), (21, 5, 1)]:
        records[post_id] = make_attachment(
            db, post_id, datetime(2026, 1, day, 9, 0), parent=parent_id, upload_root=upload_root,
        )
    return records


def get_token(client, emp_id: str) -> str:
    resp = client.post("/api/auth/login", json={"emp_id": emp_id})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, emp_id: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, emp_id)}"}
