"""비즈니스 로직 서비스."""

from accounts.services.user_service import UserService

__all__ = ["UserService"]
