"""Media 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class AttachmentOut(BaseModel):
    post_id: int
    post_parent: int
    title: Optional[str] = None
    file_path: Optional[str] = None
    mime_type: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
