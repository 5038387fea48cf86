"""Nonce Service 도메인 서비스 레이어입니다. 폼 위조 방지 토큰의 발급과 검증을 담당합니다."""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from media_cleaner.config import settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
NONCE_TOKEN_TYPE = "nonce"


def create_nonce(action: str, user_id: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(seconds=settings.NONCE_LIFETIME_SECONDS)
    payload = {
        "typ": NONCE_TOKEN_TYPE,
        "action": action,
        "uid": str(user_id),
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_nonce(token: str | None, action: str, user_id: int) -> bool:
    """토큰이 같은 사용자/같은 action으로 발급되었고 만료되지 않았으면 True."""
    if not token:
        return False
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as exc:
        logger.warning("[nonce] rejected token for action=%s: %s", action, exc)
        return False

    # access token 등 다른 용도의 JWT는 nonce로 인정하지 않는다.
    if payload.get("typ") != NONCE_TOKEN_TYPE:
        return False
    return payload.get("action") == action and payload.get("uid") == str(user_id)
