"""
커스텀 예외 정의

사용자 계정 서비스에서 사용되는 예외 클래스들입니다.
서비스 계층은 예외를 직접 처리하지 않고 호출자(API 계층)로 전파하며,
API 계층이 각 예외를 HTTP 상태 코드로 변환합니다.
"""


class DuplicateEmailException(Exception):
    """
    이미 사용 중인 이메일로 회원 가입을 시도할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, email: str):
        self.email = email
        self.message = f"Email '{email}' is already in use"
        super().__init__(self.message)


class UnknownEmailException(Exception):
    """
    가입 내역이 없는 이메일로 로그인을 시도할 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, email: str):
        self.email = email
        self.message = f"No account registered with email '{email}'"
        super().__init__(self.message)


class UserNotFoundException(Exception):
    """
    사용자를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, user_id):
        self.user_id = user_id
        self.message = f"User '{user_id}' not found"
        super().__init__(self.message)


class InvalidCredentialsException(Exception):
    """
    인증 실패 시 발생하는 예외 (잘못된 비밀번호, 유효하지 않은 토큰 등)

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(self.message)


class PasswordNotSetException(InvalidCredentialsException):
    """
    비밀번호가 없는 계정(소셜 로그인 전용)에서 비밀번호 확인이 필요할 때 발생하는 예외

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(
            "This account has no password. "
            "Social login users must set a password in account settings first"
        )
