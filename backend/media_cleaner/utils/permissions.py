"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

from media_cleaner.models.user import User


ADMIN = "admin"
EDITOR = "editor"
AUTHOR = "author"
VIEWER = "viewer"

MANAGE_OPTIONS = "manage_options"
UPLOAD_FILES = "upload_files"

# capability -> 허용 role
CAPABILITY_ROLES = {
    MANAGE_OPTIONS: (ADMIN,),
    UPLOAD_FILES: (ADMIN, EDITOR, AUTHOR),
}


def user_can(user: User | None, capability: str) -> bool:
    if user is None or not user.is_active:
        return False
    return user.role in CAPABILITY_ROLES.get(capability, ())


def can_manage_media_cleaner(user: User | None) -> bool:
    return user_can(user, MANAGE_OPTIONS)
