"""Media 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from media_cleaner.database import get_db
from media_cleaner.middleware.auth_middleware import require_roles
from media_cleaner.models.user import User
from media_cleaner.schemas.media import AttachmentOut
from media_cleaner.services import media_cleaner_service
from media_cleaner.utils.permissions import ADMIN

router = APIRouter(prefix="/api/media", tags=["media"])


@router.get("/orphans", response_model=list[AttachmentOut])
def list_orphans(
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles(ADMIN)),
):
    return media_cleaner_service.find_orphans(db, limit=limit)
