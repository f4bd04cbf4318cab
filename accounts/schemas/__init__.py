"""
Pydantic 스키마 모듈
"""

from accounts.schemas.user import (
    AddressSchema,
    UserRegisterRequest,
    UserLoginRequest,
    FederatedLoginRequest,
    UserUpdateRequest,
    UserDeleteRequest,
    UserResponse,
    LoginResponse,
)

__all__ = [
    "AddressSchema",
    "UserRegisterRequest",
    "UserLoginRequest",
    "FederatedLoginRequest",
    "UserUpdateRequest",
    "UserDeleteRequest",
    "UserResponse",
    "LoginResponse",
]
