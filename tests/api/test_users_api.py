"""
회원 정보 API 엔드포인트 통합 테스트
"""

import pytest

from accounts.repositories.user_repository import UserRepository


def signup_and_login(client, email: str, password: str = "pw1234", full_name: str = "User"):
    """회원 가입 후 로그인하여 (user_id, 인증 헤더)를 반환"""
    client.post(
        "/api/auth/register",
        json={"email": email, "fullName": full_name, "password": password},
    )
    data = client.post(
        "/api/auth/login", json={"email": email, "password": password}
    ).json()
    return data["userId"], {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def member(test_client):
    return signup_and_login(test_client, "member@x.com")


@pytest.fixture
def admin(test_client, test_db):
    user_id, headers = signup_and_login(test_client, "admin@x.com")
    UserRepository(test_db).update(user_id, {"is_admin": True})
    return user_id, headers


class TestGetUserAPI:
    """회원 정보 조회 API 테스트 클래스"""

    def test_get_own_profile(self, test_client, member):
        user_id, headers = member

        response = test_client.get(f"/api/users/{user_id}", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == user_id
        assert data["email"] == "member@x.com"
        assert data["address"] is None
        assert data["phoneNumber"] is None
        assert "password" not in data

    def test_get_other_profile_forbidden(self, test_client, member):
        _, headers = member
        other_id, _ = signup_and_login(test_client, "other@x.com")

        response = test_client.get(f"/api/users/{other_id}", headers=headers)

        assert response.status_code == 403

    def test_admin_can_get_any_profile(self, test_client, member, admin):
        member_id, _ = member
        _, admin_headers = admin

        response = test_client.get(f"/api/users/{member_id}", headers=admin_headers)

        assert response.status_code == 200

    def test_admin_get_missing_user(self, test_client, admin):
        _, admin_headers = admin

        response = test_client.get("/api/users/9999", headers=admin_headers)

        assert response.status_code == 404

    def test_get_profile_requires_token(self, test_client, member):
        user_id, _ = member

        assert test_client.get(f"/api/users/{user_id}").status_code == 401


class TestListUsersAPI:
    """회원 목록 API 테스트 클래스"""

    def test_admin_lists_users(self, test_client, member, admin):
        _, admin_headers = admin

        response = test_client.get("/api/users", headers=admin_headers)

        assert response.status_code == 200
        emails = [user["email"] for user in response.json()]
        assert emails == ["member@x.com", "admin@x.com"]
        assert all("password" not in user for user in response.json())

    def test_member_cannot_list_users(self, test_client, member):
        _, headers = member

        assert test_client.get("/api/users", headers=headers).status_code == 403


class TestUpdateUserAPI:
    """회원 정보 수정 API 테스트 클래스"""

    def test_patch_address(self, test_client, member):
        user_id, headers = member
        address = {"postalCode": "04524", "address1": "서울 중구 세종대로 110", "address2": "3층"}

        response = test_client.patch(
            f"/api/users/{user_id}", json={"address": address}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["address"] == address
        assert response.json()["fullName"] == "User"

    def test_patch_name_keeps_phone(self, test_client, member):
        user_id, headers = member
        test_client.patch(
            f"/api/users/{user_id}", json={"phoneNumber": "010-1111-2222"}, headers=headers
        )

        response = test_client.patch(
            f"/api/users/{user_id}", json={"fullName": "Renamed"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["fullName"] == "Renamed"
        assert response.json()["phoneNumber"] == "010-1111-2222"

    def test_patch_password_then_login(self, test_client, member):
        user_id, headers = member

        response = test_client.patch(
            f"/api/users/{user_id}", json={"password": "newpw"}, headers=headers
        )
        assert response.status_code == 200

        new_login = test_client.post(
            "/api/auth/login", json={"email": "member@x.com", "password": "newpw"}
        )
        old_login = test_client.post(
            "/api/auth/login", json={"email": "member@x.com", "password": "pw1234"}
        )
        assert new_login.status_code == 200
        assert old_login.status_code == 401

    def test_patch_short_password_rejected(self, test_client, member):
        user_id, headers = member

        response = test_client.patch(
            f"/api/users/{user_id}", json={"password": "abc"}, headers=headers
        )

        assert response.status_code == 422

    def test_patch_password_over_72_bytes_rejected(self, test_client, member):
        user_id, headers = member

        response = test_client.patch(
            f"/api/users/{user_id}", json={"password": "비밀번호" * 8}, headers=headers
        )

        assert response.status_code == 422
        # 기존 비밀번호로 계속 로그인 가능
        login = test_client.post(
            "/api/auth/login", json={"email": "member@x.com", "password": "pw1234"}
        )
        assert login.status_code == 200

    def test_patch_null_clears_phone_and_address(self, test_client, member):
        user_id, headers = member
        address = {"postalCode": "04524", "address1": "서울 중구 세종대로 110", "address2": ""}
        test_client.patch(
            f"/api/users/{user_id}",
            json={"phoneNumber": "010-1111-2222", "address": address},
            headers=headers,
        )

        response = test_client.patch(
            f"/api/users/{user_id}",
            json={"phoneNumber": None, "address": None},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["phoneNumber"] is None
        assert response.json()["address"] is None
        assert response.json()["fullName"] == "User"

    def test_patch_null_full_name_rejected(self, test_client, member):
        user_id, headers = member

        response = test_client.patch(
            f"/api/users/{user_id}", json={"fullName": None}, headers=headers
        )

        assert response.status_code == 422

    def test_patch_null_password_keeps_password(self, test_client, member):
        user_id, headers = member

        response = test_client.patch(
            f"/api/users/{user_id}", json={"password": None}, headers=headers
        )
        assert response.status_code == 200

        login = test_client.post(
            "/api/auth/login", json={"email": "member@x.com", "password": "pw1234"}
        )
        assert login.status_code == 200

    def test_patch_other_user_forbidden(self, test_client, member):
        _, headers = member
        other_id, _ = signup_and_login(test_client, "other@x.com")

        response = test_client.patch(
            f"/api/users/{other_id}", json={"fullName": "Hacked"}, headers=headers
        )

        assert response.status_code == 403


class TestDeleteUserAPI:
    """회원 탈퇴 / 관리자 삭제 API 테스트 클래스"""

    def test_delete_self(self, test_client, member, admin):
        user_id, headers = member
        _, admin_headers = admin

        response = test_client.request(
            "DELETE", f"/api/users/{user_id}", json={"password": "pw1234"}, headers=headers
        )

        assert response.status_code == 204
        assert test_client.get(f"/api/users/{user_id}", headers=admin_headers).status_code == 404

    def test_delete_self_wrong_password(self, test_client, member):
        user_id, headers = member

        response = test_client.request(
            "DELETE", f"/api/users/{user_id}", json={"password": "wrong"}, headers=headers
        )

        assert response.status_code == 401
        assert test_client.get(f"/api/users/{user_id}", headers=headers).status_code == 200

    def test_delete_self_federated_account(self, test_client):
        data = test_client.post(
            "/api/auth/login/federated",
            json={"email": "kakao@x.com", "fullName": "K", "loginTypeCode": "kakao"},
        ).json()
        headers = {"Authorization": f"Bearer {data['token']}"}

        response = test_client.request(
            "DELETE", f"/api/users/{data['userId']}", json={"password": ""}, headers=headers
        )

        assert response.status_code == 401
        assert "no password" in response.json()["detail"]

    def test_delete_other_user_forbidden(self, test_client, member, admin):
        _, headers = member
        admin_id, _ = admin

        response = test_client.request(
            "DELETE", f"/api/users/{admin_id}", json={"password": "pw1234"}, headers=headers
        )

        assert response.status_code == 403

    def test_admin_delete(self, test_client, member, admin):
        member_id, _ = member
        _, admin_headers = admin

        response = test_client.delete(f"/api/admin/users/{member_id}", headers=admin_headers)

        assert response.status_code == 204
        assert test_client.delete(
            f"/api/admin/users/{member_id}", headers=admin_headers
        ).status_code == 404

    def test_member_cannot_admin_delete(self, test_client, member):
        user_id, headers = member

        response = test_client.delete(f"/api/admin/users/{user_id}", headers=headers)

        assert response.status_code == 403
