"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from media_cleaner.config import settings
from media_cleaner.database import get_db
from media_cleaner.schemas.user import LoginRequest, TokenResponse, UserOut
from media_cleaner.services.auth_service import create_access_token, mock_sso_login
from media_cleaner.middleware.auth_middleware import ACCESS_TOKEN_COOKIE, get_current_user
from media_cleaner.models.user import User

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = mock_sso_login(db, request.emp_id)
    token = create_access_token(user.user_id)
    # 관리자 HTML 화면(form POST)에서 사용할 수 있도록 쿠키로도 내려준다.
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
    )
    return TokenResponse(access_token=token, user=UserOut.model_validate(user))


@router.post("/logout")
def logout(response: Response, current_user: User = Depends(get_current_user)):
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return {"message": "Logged out."}


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user
