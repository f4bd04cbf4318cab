#!/usr/bin/env python3
"""
관리자 계정 생성 스크립트

계정이 없으면 회원 가입 후 관리자로 지정하고, 이미 있으면 관리자 권한만 부여합니다.
관리자 삭제 API(DELETE /api/admin/users/{id})를 사용하려면 관리자 계정이 필요합니다.

사용 예:
    python scripts/create_admin.py --email admin@example.com --name 관리자 --password admin1234
"""

import argparse
import sys

from accounts.core.config import get_settings
from accounts.core.exceptions import DuplicateEmailException
from accounts.db.database import get_session_factory, init_db
from accounts.repositories.user_repository import UserRepository
from accounts.services.user_service import UserService


def create_admin(email: str, full_name: str, password: str) -> int:
    """관리자 계정을 생성(또는 승격)하고 사용자 ID를 반환합니다."""
    init_db()
    db = get_session_factory()()
    try:
        repository = UserRepository(db)
        service = UserService(repository, get_settings())

        user = service.get_by_email(email)
        if user:
            print(f"ℹ️  기존 계정 발견: ID {user.id} ({email})")
        else:
            try:
                user = service.register(email, full_name, password)
            except DuplicateEmailException as e:
                print(f"❌ {e}")
                sys.exit(1)
            print(f"✅ 계정 생성: ID {user.id} ({email})")

        # 관리자 플래그는 서비스의 update()로 변경할 수 없으므로 저장소를 직접 사용
        repository.update(user.id, {"is_admin": True})
        print(f"✅ 관리자 권한 부여 완료: ID {user.id}")
        return user.id
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="관리자 계정 생성")
    parser.add_argument("--email", required=True, help="관리자 이메일")
    parser.add_argument("--name", default="관리자", help="표시 이름")
    parser.add_argument("--password", required=True, help="비밀번호 (4자 이상)")
    args = parser.parse_args()

    if len(args.password) < 4:
        parser.error("password must be at least 4 characters")

    create_admin(args.email, args.name, args.password)


if __name__ == "__main__":
    main()
