"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from media_cleaner.models.user import User
from media_cleaner.models.post import Post

__all__ = [
    "User",
    "Post",
]
