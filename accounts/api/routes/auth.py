"""
인증 관련 API 엔드포인트

회원 가입, 일반/소셜 로그인, 현재 사용자 정보 조회 기능을 제공합니다.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from accounts.api.deps import get_current_user, get_user_service
from accounts.services.user_service import UserService
from accounts.schemas.user import (
    UserRegisterRequest,
    UserLoginRequest,
    FederatedLoginRequest,
    LoginResponse,
    UserResponse,
)
from accounts.core.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    UnknownEmailException,
)
from accounts.models.user import User


router = APIRouter()


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
def register(
    user_data: UserRegisterRequest,
    service: UserService = Depends(get_user_service),
):
    """
    새 사용자를 등록합니다.

    Raises:
        HTTPException 409: 이미 사용 중인 이메일

    Example:
        Request:
        ```json
        {
            "email": "a@x.com",
            "fullName": "A",
            "password": "pw1234"
        }
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "email": "a@x.com",
            "fullName": "A",
            "profileImg": "profileImg/17.jpg",
            "isAdmin": false,
            ...
        }
        ```
    """
    try:
        return service.register(
            email=user_data.email,
            full_name=user_data.full_name,
            password=user_data.password,
        )

    except DuplicateEmailException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLoginRequest,
    service: UserService = Depends(get_user_service),
):
    """
    이메일/비밀번호 로그인 및 JWT 토큰 발급

    Raises:
        HTTPException 404: 가입 내역이 없는 이메일
        HTTPException 401: 비밀번호 불일치
    """
    try:
        return service.login(email=credentials.email, password=credentials.password)

    except UnknownEmailException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    except InvalidCredentialsException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.post("/login/federated", response_model=LoginResponse)
def login_federated(
    profile: FederatedLoginRequest,
    service: UserService = Depends(get_user_service),
):
    """
    소셜 로그인 (첫 로그인 시 자동 가입) 및 JWT 토큰 발급

    Example:
        Request:
        ```json
        {
            "email": "kakao_user@x.com",
            "fullName": "카카오유저",
            "loginTypeCode": "kakao"
        }
        ```
    """
    return service.login_federated(
        email=profile.email,
        full_name=profile.full_name,
        login_type_code=profile.login_type_code,
    )


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: User = Depends(get_current_user),
):
    """
    현재 인증된 사용자의 정보를 조회합니다.

    Raises:
        HTTPException 401: 인증되지 않은 요청
    """
    return current_user
