"""Media Cleaner 도메인 서비스 레이어입니다. 고아 미디어 조회와 일괄 삭제 흐름을 캡슐화합니다."""

import logging
import os
from dataclasses import dataclass
from typing import Iterable
from urllib.parse import quote

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from media_cleaner.config import settings
from media_cleaner.models.post import POST_STATUS_INHERIT, POST_TYPE_ATTACHMENT, Post
from media_cleaner.models.user import User
from media_cleaner.services import attachment_service, nonce_service, transient_service
from media_cleaner.utils.permissions import can_manage_media_cleaner

logger = logging.getLogger(__name__)

PAGE_SLUG = "media-cleaner"
ACTION_FIELD = "cleaner_action"
ACTION_DELETE_MEDIA = "delete_media"
NONCE_FIELD = "_nonce"
NONCE_ACTION = "media_cleaner_delete_orphans"
DELETE_COUNT_KEY = "media_cleaner_delete_count"
# posts.post_id (SQL INTEGER) 범위
MAX_MEDIA_ID = 2**63 - 1

SECURITY_CHECK_FAILED = "Security check failed. Please try again."
PERMISSION_DENIED = "You do not have permission to perform this action."
NO_SELECTION = "No media items selected for deletion."

STATE_IDLE = "idle"
STATE_INVALID = "invalid"
STATE_REDIRECT = "redirect"


@dataclass
class DeletionOutcome:
    state: str
    deleted_count: int = 0
    error: str | None = None


def find_orphans(db: Session, limit: int = 50) -> list[Post]:
    """parent가 없는(post_parent == 0) 첨부 파일을 최신순으로 최대 limit개 반환한다."""
    if limit <= 0:
        raise ValueError("limit must be a positive integer")
    return (
        db.query(Post)
        .filter(
            Post.post_type == POST_TYPE_ATTACHMENT,
            Post.post_status == POST_STATUS_INHERIT,
            Post.post_parent == 0,
        )
        .order_by(Post.created_at.desc(), Post.post_id.desc())
        .limit(limit)
        .all()
    )


def parse_media_ids(raw_ids: Iterable[str] | None) -> list[int]:
    media_ids: list[int] = []
    for raw in raw_ids or []:
        try:
            media_id = int(str(raw).strip())
        except ValueError:
            continue
        if media_id <= 0 or media_id > MAX_MEDIA_ID or media_id in media_ids:
            continue
        media_ids.append(media_id)
    return media_ids


def handle_deletion_request(
    db: Session,
    user: User,
    action: str | None,
    nonce: str | None,
    raw_media_ids: Iterable[str] | None,
) -> DeletionOutcome:
    if action != ACTION_DELETE_MEDIA:
        return DeletionOutcome(state=STATE_IDLE)

    if not nonce_service.verify_nonce(nonce, NONCE_ACTION, user.user_id):
        logger.warning("[media_cleaner] nonce check failed for user_id=%s", user.user_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=SECURITY_CHECK_FAILED)

    if not can_manage_media_cleaner(user):
        logger.warning("[media_cleaner] user_id=%s lacks manage_options", user.user_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=PERMISSION_DENIED)

    media_ids = parse_media_ids(raw_media_ids)
    if not media_ids:
        return DeletionOutcome(state=STATE_INVALID, error=NO_SELECTION)

    deleted_count = delete_media(db, media_ids)
    transient_service.set_transient(DELETE_COUNT_KEY, deleted_count, settings.DELETE_COUNT_TTL_SECONDS)
    logger.info(
        "[media_cleaner] user_id=%s deleted %s of %s selected attachments",
        user.user_id,
        deleted_count,
        len(media_ids),
    )
    return DeletionOutcome(state=STATE_REDIRECT, deleted_count=deleted_count)


def delete_media(db: Session, media_ids: Iterable[int]) -> int:
    deleted_count = 0
    for media_id in media_ids:
        # 한 건 실패해도 나머지는 계속 처리한다. 실패 건은 집계에서 빠진다.
        try:
            deleted = attachment_service.delete_attachment(db, media_id, force=True)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.warning("[media_cleaner] delete failed for attachment id=%s: %s", media_id, exc)
            continue
        if deleted:
            deleted_count += 1
        else:
            logger.warning("[media_cleaner] delete failed for attachment id=%s", media_id)
    return deleted_count


def consume_delete_count() -> int | None:
    return transient_service.pop_transient(DELETE_COUNT_KEY)


def attachment_filename(attachment: Post) -> str:
    return os.path.basename(attachment.file_path or "")


def is_image(attachment: Post) -> bool:
    return (attachment.mime_type or "").startswith("image/")


def build_orphan_rows(orphans: Iterable[Post]) -> list[dict]:
    rows = []
    for orphan in orphans:
        rows.append({
            "post_id": orphan.post_id,
            "title": orphan.title or attachment_filename(orphan),
            "filename": attachment_filename(orphan),
            "thumbnail_url": f"/uploads/{quote(orphan.file_path)}" if is_image(orphan) else None,
            "uploaded_on": orphan.created_at.strftime("%Y-%m-%d") if orphan.created_at else "",
            "mime_type": orphan.mime_type or "",
        })
    return rows
