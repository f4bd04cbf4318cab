"""데이터 접근 저장소."""

from accounts.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
