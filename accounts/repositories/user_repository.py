"""
사용자 저장소

User 테이블에 대한 데이터 접근(조회/생성/수정/삭제)만 담당합니다.
비즈니스 규칙(중복 확인, 비밀번호 해싱 등)은 UserService가 처리합니다.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accounts.core.exceptions import DuplicateEmailException, UserNotFoundException
from accounts.models.user import User


class UserRepository:
    """SQLAlchemy 세션 기반 사용자 저장소"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def create(self, fields: Dict[str, Any]) -> User:
        """
        새 사용자를 저장합니다.

        이메일 UNIQUE 제약 위반은 DuplicateEmailException으로 변환합니다.
        (서비스의 사전 중복 확인과 저장 사이에 끼어든 동시 가입 요청)

        Raises:
            DuplicateEmailException: 같은 이메일이 이미 저장된 경우
        """
        user = User(**fields)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmailException(fields.get("email"))
        self.db.refresh(user)

        return user

    def update(self, user_id: int, update: Dict[str, Any]) -> User:
        """
        주어진 필드만 덮어씁니다 (얕은 병합).

        Raises:
            UserNotFoundException: 사용자가 없는 경우
        """
        user = self.find_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id)

        for field, value in update.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)

        return user

    def delete(self, user_id: int) -> None:
        user = self.find_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id)

        self.db.delete(user)
        self.db.commit()
