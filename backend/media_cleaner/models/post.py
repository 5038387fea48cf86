"""Post/Attachment 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from media_cleaner.database import Base

POST_TYPE_ATTACHMENT = "attachment"
POST_STATUS_INHERIT = "inherit"
POST_STATUS_TRASH = "trash"


class Post(Base):
    __tablename__ = "posts"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    post_type = Column(String(20), nullable=False, default="post")  # post/page/attachment
    post_status = Column(String(20), nullable=False, default="publish")  # publish/draft/inherit/trash
    # 0 = 부모 게시물 없음 (orphan). FK가 아니라 정수 참조로 유지한다.
    post_parent = Column(Integer, nullable=False, default=0)
    title = Column(String(200))
    file_path = Column(String(500))  # UPLOAD_DIR 기준 상대 경로
    mime_type = Column(String(100))
    author_id = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    author = relationship("User", back_populates="posts")

    __table_args__ = (
        Index("idx_post_type_status_parent", "post_type", "post_status", "post_parent"),
        Index("idx_post_created_at", "created_at"),
    )
