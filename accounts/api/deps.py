"""
FastAPI 의존성 주입 함수들

데이터베이스 세션, 설정, 서비스, 인증/권한 등의 의존성을 제공합니다.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from accounts.core.config import Settings, get_settings
from accounts.db.database import get_db
from accounts.models.user import User
from accounts.repositories.user_repository import UserRepository
from accounts.services.user_service import UserService
from accounts.core.exceptions import InvalidCredentialsException, UserNotFoundException


# OAuth2 토큰 스키마 설정
# tokenUrl은 토큰을 얻기 위한 엔드포인트 경로
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_user_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    """요청 단위 DB 세션으로 UserService를 생성하는 의존성 함수"""
    return UserService(UserRepository(db), settings)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    service: UserService = Depends(get_user_service),
) -> User:
    """
    JWT 토큰으로 현재 인증된 사용자를 조회하는 의존성 함수

    Args:
        token: Bearer 토큰 (자동으로 Authorization 헤더에서 추출)
        service: 사용자 서비스

    Returns:
        User: 인증된 사용자 객체

    Raises:
        HTTPException: 인증 실패 시 401 Unauthorized

    Example:
        @router.get("/protected")
        def protected_route(current_user: User = Depends(get_current_user)):
            return {"user": current_user.email}
    """
    try:
        return service.get_current_user(token)

    except (InvalidCredentialsException, UserNotFoundException) as e:
        # 토큰이 유효하지 않거나, 토큰은 유효하지만 사용자가 없는 경우
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """관리자만 통과시키는 의존성 함수 (403 Forbidden)"""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user
