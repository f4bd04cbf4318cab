"""
사용자 계정 서비스

회원 가입, 일반/소셜 로그인, 회원 정보 조회/수정, 회원 탈퇴 기능을 제공합니다.
저장소(UserRepository)와 설정(Settings)은 생성자로 주입받습니다.
"""

import logging
import random
from typing import Any, Dict, List, Optional

import jwt

from accounts.core.config import Settings
from accounts.core.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    PasswordNotSetException,
    UnknownEmailException,
    UserNotFoundException,
)
from accounts.core.security import (
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)
from accounts.models.user import User
from accounts.repositories.user_repository import UserRepository
from accounts.schemas.user import LoginResponse

logger = logging.getLogger(__name__)

# update()로 변경 가능한 필드 (profile_img, is_admin, email은 변경 불가)
UPDATABLE_FIELDS = ("full_name", "password", "address", "phone_number")


class UserService:
    """사용자 계정 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    def __init__(self, repository: UserRepository, settings: Settings):
        self.repository = repository
        self.settings = settings

    # --------- 회원 가입 / 로그인 ----------

    def register(self, email: str, full_name: str, password: str) -> User:
        """
        새 사용자를 등록합니다.

        Args:
            email: 이메일 (로그인 ID)
            full_name: 이름
            password: 평문 비밀번호

        Returns:
            User: 생성된 사용자 객체 (password 필드는 해시값)

        Raises:
            DuplicateEmailException: 이미 사용 중인 이메일인 경우

        Example:
            >>> user = service.register("a@x.com", "A", "pw1234")
            >>> user.profile_img
            'profileImg/17.jpg'
        """
        if self.repository.find_by_email(email):
            raise DuplicateEmailException(email)

        user = self.repository.create(
            {
                "email": email,
                "full_name": full_name,
                "password": hash_password(password, self.settings.bcrypt_rounds),
                "profile_img": self._random_profile_img(),
            }
        )
        logger.info("Registered user id=%s email=%s", user.id, email)

        return user

    def login_federated(
        self, email: str, full_name: str, login_type_code: str
    ) -> LoginResponse:
        """
        소셜 로그인을 처리합니다.

        처음 로그인하는 이메일이면 비밀번호 없는 계정을 생성한 뒤 토큰을 발급하고,
        이미 가입된 이메일이면 저장된 계정 정보로 토큰을 발급합니다.
        응답의 full_name은 항상 저장된 이름입니다.

        Args:
            email: 인증 제공자가 확인한 이메일
            full_name: 인증 제공자의 프로필 이름 (신규 가입 시에만 사용)
            login_type_code: 인증 제공자 구분 코드 (예: "kakao")

        Returns:
            LoginResponse: 토큰 및 사용자 요약 정보
        """
        user = self.repository.find_by_email(email)
        if not user:
            try:
                user = self.repository.create(
                    {
                        "email": email,
                        "full_name": full_name,
                        "login_type_code": login_type_code,
                        "profile_img": self._random_profile_img(),
                    }
                )
                logger.info(
                    "Registered federated user id=%s email=%s provider=%s",
                    user.id,
                    email,
                    login_type_code,
                )
            except DuplicateEmailException:
                # 동시에 들어온 첫 로그인이 먼저 계정을 만든 경우 그 계정으로 로그인
                user = self.repository.find_by_email(email)
                if not user:
                    raise
                logger.info("Federated first-login race resolved id=%s email=%s", user.id, email)

        return self._login_response(user)

    def login(self, email: str, password: str) -> LoginResponse:
        """
        이메일/비밀번호 로그인을 처리합니다.

        Raises:
            UnknownEmailException: 가입 내역이 없는 이메일인 경우
            InvalidCredentialsException: 비밀번호가 일치하지 않는 경우
        """
        user = self.repository.find_by_email(email)
        if not user:
            logger.info("Login failed: unknown email=%s", email)
            raise UnknownEmailException(email)

        if not verify_password(password, user.password):
            logger.info("Login failed: wrong password for user id=%s", user.id)
            raise InvalidCredentialsException("Password does not match")

        return self._login_response(user)

    def get_current_user(self, token: str) -> User:
        """
        JWT 토큰에서 현재 사용자를 조회합니다.

        Raises:
            InvalidCredentialsException: 토큰이 유효하지 않거나 만료된 경우
            UserNotFoundException: 토큰은 유효하지만 사용자가 없는 경우
        """
        try:
            payload = verify_access_token(token, self.settings)
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialsException("Token has expired")
        except jwt.InvalidTokenError:
            raise InvalidCredentialsException("Invalid token")

        user_id = payload.get("userId")
        if user_id is None:
            raise InvalidCredentialsException("Token payload missing 'userId' claim")

        user = self.repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id)

        return user

    # --------- 조회 ----------

    def get_by_email(self, email: str) -> Optional[User]:
        return self.repository.find_by_email(email)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.find_by_id(user_id)

    def list_all(self) -> List[User]:
        return self.repository.find_all()

    # --------- 수정 / 삭제 ----------

    def update(self, user_id: int, fields: Dict[str, Any]) -> User:
        """
        회원 정보를 부분 수정합니다.

        전달된 필드만 변경하며, 비밀번호는 다시 해싱하여 저장합니다.
        빈 비밀번호는 무시합니다.

        Args:
            user_id: 사용자 ID
            fields: 변경할 필드 (full_name, password, address, phone_number)

        Returns:
            User: 수정된 사용자 객체

        Raises:
            UserNotFoundException: 사용자가 없는 경우
        """
        if not self.repository.find_by_id(user_id):
            raise UserNotFoundException(user_id)

        to_update = {
            field: value for field, value in fields.items() if field in UPDATABLE_FIELDS
        }

        password = to_update.pop("password", None)
        if password:
            to_update["password"] = hash_password(password, self.settings.bcrypt_rounds)

        user = self.repository.update(user_id, to_update)
        logger.info("Updated user id=%s fields=%s", user_id, sorted(to_update))

        return user

    def delete_self(self, user_id: int, password: str) -> None:
        """
        본인 확인(비밀번호) 후 회원 탈퇴를 처리합니다.

        Raises:
            UserNotFoundException: 사용자가 없는 경우
            PasswordNotSetException: 비밀번호가 없는 소셜 로그인 전용 계정인 경우
            InvalidCredentialsException: 비밀번호가 일치하지 않는 경우
        """
        user = self.repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id)

        if not user.has_password:
            raise PasswordNotSetException(user_id)

        if not verify_password(password, user.password):
            raise InvalidCredentialsException("Current password does not match")

        self.repository.delete(user_id)
        logger.info("Deleted user id=%s (self)", user_id)

    def delete_admin(self, user_id: int) -> None:
        """
        관리자 권한으로 회원을 삭제합니다. 권한 확인은 호출자(API 계층)의 책임입니다.

        Raises:
            UserNotFoundException: 사용자가 없는 경우
        """
        if not self.repository.find_by_id(user_id):
            raise UserNotFoundException(user_id)

        self.repository.delete(user_id)
        logger.info("Deleted user id=%s (admin)", user_id)

    # --------- Helpers ----------

    def _random_profile_img(self) -> str:
        return f"profileImg/{random.randint(1, self.settings.profile_image_count)}.jpg"

    def _issue_token(self, user: User) -> str:
        return create_access_token(
            {"userId": user.id, "isAdmin": user.is_admin}, self.settings
        )

    def _login_response(self, user: User) -> LoginResponse:
        return LoginResponse(
            token=self._issue_token(user),
            is_admin=user.is_admin,
            user_id=user.id,
            profile_img=user.profile_img,
            full_name=user.full_name,
        )
