"""
SQLAlchemy 데이터베이스 설정

SQLAlchemy 엔진, 세션, Base 클래스를 정의합니다.
엔진은 최초 요청 시점에 설정을 읽어 생성합니다 (import 시점에 설정을 요구하지 않음).
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from accounts.core.config import get_settings

Base = declarative_base()


@lru_cache
def get_engine() -> Engine:
    """설정의 database_url로 엔진을 생성합니다 (프로세스당 1회)."""
    settings = get_settings()

    connect_args = {}
    if settings.is_sqlite:
        # SQLite 사용 시 check_same_thread 비활성화
        connect_args["check_same_thread"] = False

    return create_engine(
        settings.database_url,
        connect_args=connect_args,
        pool_pre_ping=True,  # connection 유효성 자동 체크
    )


@lru_cache
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def init_db() -> None:
    """모든 테이블을 생성합니다 (이미 존재하면 무시)."""
    # 모델 등록
    import accounts.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def get_db():
    """
    FastAPI 의존성 주입용 데이터베이스 세션 제너레이터

    사용 예:
        @router.get("/users/")
        def read_users(db: Session = Depends(get_db)):
            return db.query(User).all()
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
