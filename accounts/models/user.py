"""
User 모델

사용자 계정 정보를 저장하는 SQLAlchemy 모델입니다.
"""

from datetime import datetime
from sqlalchemy import Boolean, Column, Integer, String, DateTime, JSON
from accounts.db.database import Base


class User(Base):
    """
    사용자 모델

    Attributes:
        id: 사용자 고유 ID (Primary Key)
        email: 이메일 주소 (Unique, Not Null) - 로그인 식별자
        full_name: 표시 이름 (Not Null)
        password: bcrypt 해싱된 비밀번호 (Nullable, 소셜 로그인 전용 계정은 없음)
        profile_img: 프로필 이미지 경로 (가입 시 1회 무작위 지정)
        is_admin: 관리자 여부 (기본값 False)
        login_type_code: 소셜 로그인 구분 코드 (예: "kakao", 일반 가입은 None)
        address: 주소 {"postal_code", "address1", "address2"} (Nullable)
        phone_number: 전화번호 (Nullable)
        created_at: 생성 일시 (자동 설정)
        updated_at: 수정 일시 (자동 업데이트)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(100), nullable=False)
    password = Column(String(255), nullable=True)
    profile_img = Column(String(255), nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    login_type_code = Column(String(20), nullable=True)
    address = Column(JSON, nullable=True)
    phone_number = Column(String(30), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    @property
    def has_password(self) -> bool:
        """로컬 비밀번호가 설정된 계정인지 여부"""
        return bool(self.password)

    def __repr__(self) -> str:
        """User 객체의 문자열 표현"""
        return f"<User(id={self.id}, email='{self.email}')>"

    def __str__(self) -> str:
        """User 객체의 문자열 표현 (사용자 친화적)"""
        return f"User: {self.email}"
