"""
회원 정보 관련 API 엔드포인트

회원 목록/단건 조회, 회원 정보 부분 수정, 회원 탈퇴, 관리자 회원 삭제 기능을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from accounts.api.deps import get_current_admin, get_current_user, get_user_service
from accounts.services.user_service import UserService
from accounts.schemas.user import UserDeleteRequest, UserResponse, UserUpdateRequest
from accounts.core.exceptions import (
    InvalidCredentialsException,
    UserNotFoundException,
)
from accounts.models.user import User


router = APIRouter()
admin_router = APIRouter()


def _ensure_self_or_admin(current_user: User, user_id: int) -> None:
    """본인 또는 관리자만 접근 가능 (403 Forbidden)"""
    if current_user.id != user_id and not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own account",
        )


@router.get("", response_model=List[UserResponse])
def list_users(
    _admin: User = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
):
    """전체 회원 목록을 조회합니다 (관리자 전용)."""
    return service.list_all()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """
    회원 정보를 조회합니다.

    Raises:
        HTTPException 403: 본인/관리자가 아닌 경우
        HTTPException 404: 회원이 없는 경우
    """
    _ensure_self_or_admin(current_user, user_id)

    user = service.get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(UserNotFoundException(user_id)),
        )
    return user


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    updates: UserUpdateRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """
    회원 정보를 부분 수정합니다. 요청 본문에 포함된 필드만 변경됩니다.

    Example:
        Request:
        ```json
        {
            "address": {
                "postalCode": "04524",
                "address1": "서울 중구 세종대로 110",
                "address2": "3층"
            }
        }
        ```

    Raises:
        HTTPException 403: 본인/관리자가 아닌 경우
        HTTPException 404: 회원이 없는 경우
    """
    _ensure_self_or_admin(current_user, user_id)

    try:
        # 보내지 않은 필드는 유지, null을 보낸 address/phoneNumber는 삭제
        return service.update(user_id, updates.model_dump(exclude_unset=True))

    except UserNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    confirmation: UserDeleteRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """
    현재 비밀번호를 확인한 뒤 회원 탈퇴를 처리합니다 (본인 전용).

    Raises:
        HTTPException 401: 비밀번호 불일치 또는 비밀번호가 없는 소셜 로그인 계정
        HTTPException 403: 본인이 아닌 경우
        HTTPException 404: 회원이 없는 경우
    """
    if current_user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only delete your own account",
        )

    try:
        service.delete_self(user_id, confirmation.password)

    except UserNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    except InvalidCredentialsException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_as_admin(
    user_id: int,
    _admin: User = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
):
    """
    관리자 권한으로 회원을 삭제합니다 (비밀번호 확인 없음).

    Raises:
        HTTPException 403: 관리자가 아닌 경우
        HTTPException 404: 회원이 없는 경우
    """
    try:
        service.delete_admin(user_id)

    except UserNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
