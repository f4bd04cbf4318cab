import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts.api.routes import auth, users
from accounts.core.config import get_settings
from accounts.core.logger import configure_logging
from accounts.db.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """기동 시 설정 검증 (JWT 시크릿 키 누락 시 기동 실패), 로깅 구성, 테이블 생성"""
    settings = get_settings()
    configure_logging(settings)
    init_db()
    logger.info("User account API started (env=%s)", settings.app_env)
    yield


app = FastAPI(
    title="User Account API",
    description="회원 가입, 로그인(일반/소셜), 회원 정보 관리 API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(users.admin_router, prefix="/api/admin", tags=["admin"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "User Account API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
