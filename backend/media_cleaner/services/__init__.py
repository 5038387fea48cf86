"""서비스 레이어 패키지 초기화 모듈입니다."""

from media_cleaner.services import (
    auth_service,
    attachment_service,
    nonce_service,
    transient_service,
    # media_cleaner_service는 위 서비스들을 참조하므로 마지막에 로드한다.
    media_cleaner_service,
)
