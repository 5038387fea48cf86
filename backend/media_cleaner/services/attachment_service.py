"""Attachment Service 도메인 서비스 레이어입니다. 첨부 파일 레코드와 저장 파일의 삭제를 담당합니다."""

import logging
import os

from sqlalchemy.orm import Session

from media_cleaner.config import settings
from media_cleaner.models.post import POST_STATUS_TRASH, POST_TYPE_ATTACHMENT, Post

logger = logging.getLogger(__name__)


def get_attachment(db: Session, post_id: int) -> Post | None:
    return db.query(Post).filter(
        Post.post_id == post_id,
        Post.post_type == POST_TYPE_ATTACHMENT,
    ).first()


def resolve_attached_file(attachment: Post) -> str | None:
    """저장 파일의 절대 경로. UPLOAD_DIR 밖을 가리키면 None."""
    if not attachment.file_path:
        return None
    root = os.path.realpath(settings.UPLOAD_DIR)
    abs_path = os.path.realpath(os.path.join(root, attachment.file_path))
    if os.path.commonpath([root, abs_path]) != root:
        return None
    return abs_path


def delete_attachment(db: Session, post_id: int, force: bool = True) -> bool:
    attachment = get_attachment(db, post_id)
    if attachment is None:
        return False

    if not force:
        attachment.post_status = POST_STATUS_TRASH
        db.commit()
        return True

    abs_path = resolve_attached_file(attachment)
    if abs_path is None and attachment.file_path:
        logger.warning(
            "[attachment] post_id=%s file path %r is outside the upload dir; keeping file",
            post_id,
            attachment.file_path,
        )
    elif abs_path is not None and os.path.exists(abs_path):
        try:
            os.remove(abs_path)
        except OSError as exc:
            logger.warning("[attachment] failed to remove file for post_id=%s: %s", post_id, exc)
            return False

    db.delete(attachment)
    db.commit()
    return True
