"""Media Cleaner 관리자 화면 라우터입니다. 고아 미디어 목록을 렌더링하고 삭제 폼을 처리합니다."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from media_cleaner.config import settings
from media_cleaner.database import get_db
from media_cleaner.middleware.auth_middleware import get_current_user, require_roles
from media_cleaner.models.user import User
from media_cleaner.services import media_cleaner_service, nonce_service
from media_cleaner.utils.permissions import ADMIN, can_manage_media_cleaner

router = APIRouter(prefix="/admin/tools", tags=["media-cleaner"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


@router.get(f"/{media_cleaner_service.PAGE_SLUG}", response_class=HTMLResponse, name="media_cleaner_page")
def media_cleaner_page(
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN)),
):
    return _render_page(request, db, current_user)


@router.post(f"/{media_cleaner_service.PAGE_SLUG}", name="media_cleaner_submit")
def media_cleaner_submit(
    request: Request,
    cleaner_action: str | None = Form(None),
    nonce: str | None = Form(None, alias=media_cleaner_service.NONCE_FIELD),
    media_ids: list[str] = Form([]),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    outcome = media_cleaner_service.handle_deletion_request(
        db,
        current_user,
        action=cleaner_action,
        nonce=nonce,
        raw_media_ids=media_ids,
    )

    if outcome.state == media_cleaner_service.STATE_REDIRECT:
        # 새로고침 시 재삭제를 막기 위해 같은 화면으로 303 리다이렉트한다.
        return RedirectResponse(
            url=str(request.url_for("media_cleaner_page")),
            status_code=status.HTTP_303_SEE_OTHER,
        )

    if not can_manage_media_cleaner(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=media_cleaner_service.PERMISSION_DENIED)
    return _render_page(request, db, current_user, error=outcome.error)


def _render_page(request: Request, db: Session, current_user: User, error: str | None = None):
    deleted_count = media_cleaner_service.consume_delete_count()
    orphans = media_cleaner_service.find_orphans(db, limit=settings.ORPHAN_PAGE_SIZE)
    context = {
        "page_title": "Orphaned Media Cleaner",
        "user": current_user,
        "deleted_count": deleted_count,
        "error": error,
        "rows": media_cleaner_service.build_orphan_rows(orphans),
        "page_size": settings.ORPHAN_PAGE_SIZE,
        "action_field": media_cleaner_service.ACTION_FIELD,
        "action_value": media_cleaner_service.ACTION_DELETE_MEDIA,
        "nonce_field": media_cleaner_service.NONCE_FIELD,
        "nonce": nonce_service.create_nonce(media_cleaner_service.NONCE_ACTION, current_user.user_id),
    }
    return templates.TemplateResponse(request, "media_cleaner.html.j2", context)
