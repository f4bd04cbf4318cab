"""
pytest 픽스처 정의
"""

import os

# 애플리케이션 import 전에 필수 환경 변수 설정 (JWT 시크릿 키는 기본값이 없음)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-testing-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from accounts.core.config import Settings, get_settings
from accounts.db.database import Base, get_db
from accounts.main import app
from accounts.repositories.user_repository import UserRepository
from accounts.services.user_service import UserService


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        jwt_secret_key="test-secret-key-for-testing-0123456789",
        jwt_algorithm="HS256",
        bcrypt_rounds=4,  # 테스트 속도를 위해 최소 작업 계수 사용
        database_url="sqlite://",
    )


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고,
    테스트 종료 후 테이블을 삭제하여 격리를 보장합니다.
    """
    # In-memory SQLite 데이터베이스 엔진 생성
    # (TestClient의 요청 처리 스레드에서도 같은 연결을 쓰도록 StaticPool 사용)
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # 모든 테이블 생성
    Base.metadata.create_all(bind=engine)

    # 테스트용 세션 생성
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        # 테스트 종료 후 세션 닫기
        db.close()
        # 모든 테이블 삭제
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def user_repository(test_db) -> UserRepository:
    return UserRepository(test_db)


@pytest.fixture(scope="function")
def user_service(user_repository, settings) -> UserService:
    """테스트 DB 저장소를 주입한 UserService 픽스처"""
    return UserService(user_repository, settings)


@pytest.fixture(scope="function")
def test_client(test_db, settings):
    """각 테스트마다 테스트 데이터베이스/설정을 주입한 클라이언트를 제공하는 픽스처"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    # 데이터베이스/설정 의존성 오버라이드
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings

    # TestClient 생성
    with TestClient(app) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()
