"""고아 미디어 조회(find_orphans) 동작을 검증하는 자동화 테스트입니다."""

from datetime import datetime, timedelta

import pytest

from media_cleaner.models.post import Post
from media_cleaner.services import media_cleaner_service
from tests.conftest import make_attachment


def test_find_orphans_returns_only_unparented_newest_first(db, seed_media):
    orphans = media_cleaner_service.find_orphans(db, limit=50)
    assert [o.post_id for o in orphans] == [12, 11, 10]
    assert all(o.post_parent == 0 for o in orphans)


def test_find_orphans_respects_limit(db):
    base = datetime(2026, 3, 1)
    for post_id in range(100, 110):
        make_attachment(db, post_id, base + timedelta(hours=post_id))

    orphans = media_cleaner_service.find_orphans(db, limit=4)
    assert [o.post_id for o in orphans] == [109, 108, 107, 106]


def test_find_orphans_ordering_is_non_increasing(db):
    base = datetime(2026, 3, 1)
    for post_id, hours in [(1, 5), (2, 1), (3, 9), (4, 3)]:
        make_attachment(db, post_id, base + timedelta(hours=hours))

    created = [o.created_at for o in media_cleaner_service.find_orphans(db)]
    assert created == sorted(created, reverse=True)


def test_find_orphans_ignores_non_attachments_and_trashed(db):
    created_at = datetime(2026, 1, 1)
    db.add(Post(post_id=1, post_type="post", post_status="publish", post_parent=0, created_at=created_at))
    db.add(Post(post_id=2, post_type="page", post_status="inherit", post_parent=0, created_at=created_at))
    db.commit()
    make_attachment(db, 3, created_at, status="trash")
    make_attachment(db, 4, created_at)

    assert [o.post_id for o in media_cleaner_service.find_orphans(db)] == [4]


def test_find_orphans_empty_library(db):
    assert media_cleaner_service.find_orphans(db) == []


@pytest.mark.parametrize("limit", [0, -5])
def test_find_orphans_rejects_non_positive_limit(db, limit):
    with pytest.raises(ValueError):
        media_cleaner_service.find_orphans(db, limit=limit)


def test_find_orphans_is_read_only(db, seed_media):
    before = db.query(Post).count()
    media_cleaner_service.find_orphans(db, limit=1)
    assert db.query(Post).count() == before
