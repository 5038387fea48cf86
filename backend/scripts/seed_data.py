"""Seed the database with an admin user and sample media."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta
from media_cleaner.config import settings
from media_cleaner.database import SessionLocal, engine, Base
import media_cleaner.models  # noqa: F401

from media_cleaner.models.user import User
from media_cleaner.models.post import Post


def _write_sample_file(rel_path: str):
    abs_path = os.path.join(settings.UPLOAD_DIR, rel_path)
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    if not os.path.exists(abs_path):
        with open(abs_path, "wb") as f:
            f.write(b"sample")


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        users = [
            User(emp_id="admin001", name="Admin", department="Web", role="admin", email="admin@example.com"),
            User(emp_id="editor001", name="Editor", department="Content", role="editor", email="editor@example.com"),
        ]
        db.add_all(users)
        db.flush()

        page = Post(post_type="page", post_status="publish", title="About", author_id=users[1].user_id)
        db.add(page)
        db.flush()

        now = datetime.now()
        media = [
            ("2026/01/hero.jpg", "image/jpeg", page.post_id),
            ("2026/01/brochure.pdf", "application/pdf", 0),
            ("2026/02/banner-old.png", "image/png", 0),
            ("2026/02/intro.mp4", "video/mp4", 0),
        ]
        for offset, (rel_path, mime_type, parent_id) in enumerate(media):
            _write_sample_file(rel_path)
            db.add(Post(
                post_type="attachment",
                post_status="inherit",
                post_parent=parent_id,
                title=os.path.splitext(os.path.basename(rel_path))[0],
                file_path=rel_path,
                mime_type=mime_type,
                author_id=users[1].user_id,
                created_at=now - timedelta(days=len(media) - offset),
            ))

        db.commit()
        print("Seed data created successfully.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
