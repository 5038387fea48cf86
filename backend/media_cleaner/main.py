"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 업로드 정적 파일 서빙을 등록합니다."""

import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from media_cleaner.config import settings
from media_cleaner.database import Base, engine
import media_cleaner.models  # noqa: F401 - 모델 import로 metadata 등록
from media_cleaner.routers import auth, media, media_cleaner_ui

app = FastAPI(
    title="Orphaned Media Cleaner",
    description="부모 게시물이 없는 미디어 첨부 파일을 검토하고 영구 삭제하는 관리 도구",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(auth.router)
app.include_router(media.router)
app.include_router(media_cleaner_ui.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Orphaned Media Cleaner"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
