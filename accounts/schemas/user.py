"""
사용자 계정 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
브라우저 폼과의 계약에 맞춰 JSON 필드명은 camelCase(fullName, profileImg 등)를 사용하고,
파이썬 코드에서는 snake_case 속성명을 사용합니다.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from accounts.core.security import MAX_PASSWORD_BYTES

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MIN_PASSWORD_LENGTH = 4


def _check_password_bytes(value: Optional[str]) -> Optional[str]:
    if value and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return value


class CamelModel(BaseModel):
    """camelCase JSON <-> snake_case 속성 변환 기본 모델"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,  # ORM 모델 변환 허용
    )


class AddressSchema(CamelModel):
    """
    주소 스키마

    Example:
        {
            "postalCode": "04524",
            "address1": "서울 중구 세종대로 110",
            "address2": "3층"
        }
    """

    postal_code: str = Field(..., max_length=10, description="우편번호")
    address1: str = Field(..., max_length=255, description="기본 주소")
    address2: str = Field(default="", max_length=255, description="상세 주소")


class UserRegisterRequest(CamelModel):
    """
    회원 가입 요청 스키마

    Example:
        {
            "email": "a@x.com",
            "fullName": "홍길동",
            "password": "pw1234"
        }
    """

    email: str = Field(
        ...,
        max_length=255,
        pattern=EMAIL_PATTERN,
        description="이메일 (로그인 ID)",
        examples=["a@x.com"],
    )
    full_name: str = Field(
        ..., min_length=1, max_length=100, description="이름", examples=["홍길동"]
    )
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="비밀번호 (4자 이상, UTF-8 72바이트 이하)",
        examples=["pw1234"],
    )

    @field_validator("password")
    @classmethod
    def password_within_bcrypt_limit(cls, value: str) -> str:
        return _check_password_bytes(value)


class UserLoginRequest(CamelModel):
    """로그인 요청 스키마"""

    email: str = Field(..., description="이메일", examples=["a@x.com"])
    password: str = Field(..., description="비밀번호", examples=["pw1234"])


class FederatedLoginRequest(CamelModel):
    """
    소셜 로그인 요청 스키마

    외부 인증 제공자에서 받은 프로필 정보를 그대로 전달합니다.

    Example:
        {
            "email": "kakao_user@x.com",
            "fullName": "카카오유저",
            "loginTypeCode": "kakao"
        }
    """

    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    full_name: str = Field(..., min_length=1, max_length=100)
    login_type_code: str = Field(..., min_length=1, max_length=20, examples=["kakao"])


class UserUpdateRequest(CamelModel):
    """
    회원 정보 수정 요청 스키마 (부분 수정)

    전달된 필드만 변경됩니다. 빈 문자열 비밀번호는 "변경하지 않음"으로 취급하고,
    address/phoneNumber에 null을 보내면 해당 값을 삭제합니다.
    """

    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = None
    address: Optional[AddressSchema] = None
    phone_number: Optional[str] = Field(None, max_length=30)

    @field_validator("password")
    @classmethod
    def password_empty_or_long_enough(cls, value: Optional[str]) -> Optional[str]:
        if value and len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"password must be empty or at least {MIN_PASSWORD_LENGTH} characters"
            )
        return _check_password_bytes(value)

    @field_validator("full_name")
    @classmethod
    def full_name_not_null(cls, value: Optional[str]) -> str:
        # 명시적 null은 허용하지 않음 (주소/전화번호는 null로 삭제 가능)
        if value is None:
            raise ValueError("fullName cannot be null")
        return value


class UserDeleteRequest(CamelModel):
    """회원 탈퇴 요청 스키마 (현재 비밀번호 확인)"""

    password: str = Field(..., description="현재 비밀번호")


class UserResponse(CamelModel):
    """
    사용자 정보 응답 스키마

    비밀번호 해시는 포함하지 않습니다.
    """

    id: int = Field(..., description="사용자 ID")
    email: str
    full_name: str
    profile_img: str
    is_admin: bool
    login_type_code: Optional[str] = None
    address: Optional[AddressSchema] = None
    phone_number: Optional[str] = None
    created_at: datetime


class LoginResponse(CamelModel):
    """
    로그인 응답 스키마

    Example:
        {
            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "isAdmin": false,
            "userId": 1,
            "profileImg": "profileImg/17.jpg",
            "fullName": "홍길동"
        }
    """

    token: str = Field(..., description="JWT 액세스 토큰")
    is_admin: bool
    user_id: int
    profile_img: str
    full_name: str
