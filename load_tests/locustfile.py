"""
Locust load test scenarios for the user account API

테스트 시나리오:
1. 일반 사용자: 회원가입 → 로그인 → 내 정보 조회/수정 반복
2. 소셜 로그인 사용자: 같은 이메일로 반복 로그인 (계정은 1개만 생성되어야 함)
3. 중복 가입 경쟁: 여러 사용자가 같은 이메일로 동시에 가입 시도 (201은 1건만 허용)

실행 예:
    locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 --run-time 60s --host=http://localhost:8080
"""

import random
from typing import Dict, Optional

from locust import HttpUser, TaskSet, task, between, events


# 전역 메트릭 수집
duplicate_created_count = 0
race_registrations = 0
federated_user_ids: Dict[str, set] = {}

RACE_EMAIL = "race_target@loadtest.com"
PASSWORD = "test1234"


class AccountTaskSet(TaskSet):
    """일반 사용자 행동 모델"""

    def on_start(self):
        """각 사용자가 시작할 때 실행: 회원가입 및 로그인"""
        self.email = f"loadtest_{random.randint(1, 1000000)}@loadtest.com"
        self.token: Optional[str] = None
        self.user_id: Optional[int] = None

        self._register()
        self._login()

    def _register(self):
        """회원가입"""
        with self.client.post(
            "/api/auth/register",
            json={"email": self.email, "fullName": "Load Tester", "password": PASSWORD},
            name="[Auth] Register",
            catch_response=True,
        ) as response:
            if response.status_code in (201, 409):
                # 409 = 이미 존재하는 이메일 (재시작 시)
                response.success()
            else:
                response.failure(f"Registration failed: {response.status_code}")

    def _login(self):
        """로그인 및 토큰 획득"""
        with self.client.post(
            "/api/auth/login",
            json={"email": self.email, "password": PASSWORD},
            name="[Auth] Login",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                data = response.json()
                self.token = data.get("token")
                self.user_id = data.get("userId")
                response.success()
            else:
                response.failure(f"Login failed: {response.status_code}")

    def _get_headers(self) -> Dict[str, str]:
        """인증 헤더 반환"""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    @task(5)
    def view_profile(self):
        """내 정보 조회 (가장 빈번한 작업)"""
        if not self.user_id:
            return

        with self.client.get(
            f"/api/users/{self.user_id}",
            headers=self._get_headers(),
            name="[User] Get Profile",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                if "password" in response.json():
                    response.failure("Password hash leaked in response!")
                else:
                    response.success()
            else:
                response.failure(f"Get profile failed: {response.status_code}")

    @task(2)
    def update_phone(self):
        """전화번호 수정"""
        if not self.user_id:
            return

        phone = f"010-{random.randint(1000, 9999)}-{random.randint(1000, 9999)}"
        with self.client.patch(
            f"/api/users/{self.user_id}",
            json={"phoneNumber": phone},
            headers=self._get_headers(),
            name="[User] Update Phone",
            catch_response=True,
        ) as response:
            if response.status_code == 200 and response.json().get("phoneNumber") == phone:
                response.success()
            else:
                response.failure(f"Update failed: {response.status_code}")

    @task(1)
    def relogin(self):
        """재로그인 (bcrypt 검증 부하)"""
        self._login()


class FederatedTaskSet(TaskSet):
    """소셜 로그인 사용자 행동 모델"""

    def on_start(self):
        self.email = f"kakao_{random.randint(1, 50)}@loadtest.com"

    @task
    def federated_login(self):
        """같은 이메일 반복 로그인 - userId는 항상 같아야 함"""
        with self.client.post(
            "/api/auth/login/federated",
            json={"email": self.email, "fullName": "Kakao User", "loginTypeCode": "kakao"},
            name="[Auth] Federated Login",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                ids = federated_user_ids.setdefault(self.email, set())
                ids.add(response.json()["userId"])
                if len(ids) > 1:
                    response.failure(f"Multiple accounts for {self.email}: {ids}")
                else:
                    response.success()
            else:
                # 409 포함: 첫 로그인 경쟁도 기존 계정 토큰으로 응답해야 함
                response.failure(f"Federated login failed: {response.status_code}")


class RaceTaskSet(TaskSet):
    """같은 이메일 동시 가입 경쟁 - 201 응답은 1건만 허용"""

    @task
    def register_same_email(self):
        global duplicate_created_count, race_registrations

        with self.client.post(
            "/api/auth/register",
            json={"email": RACE_EMAIL, "fullName": "Racer", "password": PASSWORD},
            name="[Auth] Register (race)",
            catch_response=True,
        ) as response:
            if response.status_code == 201:
                race_registrations += 1
                if race_registrations > 1:
                    duplicate_created_count += 1
                    response.failure("Duplicate email registered! RACE LOST!")
                else:
                    response.success()
            elif response.status_code == 409:
                # 중복 이메일 (정상적인 실패)
                response.success()
            else:
                response.failure(f"Register failed: {response.status_code}")


class NormalUser(HttpUser):
    """일반 사용자"""

    tasks = [AccountTaskSet]
    wait_time = between(1, 3)  # 1-3초 대기
    host = "http://localhost:8080"


class FederatedUser(HttpUser):
    """소셜 로그인 사용자"""

    tasks = [FederatedTaskSet]
    wait_time = between(0.5, 2)
    host = "http://localhost:8080"


class RacingRegistrant(HttpUser):
    """중복 가입 경쟁 사용자"""

    tasks = [RaceTaskSet]
    wait_time = between(0.1, 0.5)  # 0.1-0.5초 대기 (매우 빠름)
    host = "http://localhost:8080"


# Locust 이벤트 핸들러
@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """테스트 시작 시 초기화"""
    global duplicate_created_count, race_registrations
    duplicate_created_count = 0
    race_registrations = 0
    federated_user_ids.clear()


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """테스트 종료 시 결과 출력"""
    print("\n" + "=" * 50)
    print("계정 서비스 부하 테스트 결과")
    print("=" * 50)
    print(f"경쟁 가입 성공(201) 건수: {race_registrations} (1 이하여야 함)")
    print(f"중복 생성 감지 건수: {duplicate_created_count}")
    duplicated = {email: ids for email, ids in federated_user_ids.items() if len(ids) > 1}
    print(f"소셜 로그인 중복 계정: {len(duplicated)}")
    print("=" * 50)
