"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.

JWT 시크릿 키는 기본값이 없습니다. 설정되지 않으면 Settings 생성 시점에
ValidationError가 발생하며, 애플리케이션은 기동하지 않습니다.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # JWT 설정
    jwt_secret_key: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int | None = None  # None이면 exp 클레임을 넣지 않음

    # 비밀번호 해싱 설정
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # 프로필 이미지 설정 (profileImg/1.jpg ~ profileImg/407.jpg)
    profile_image_count: int = Field(default=407, ge=1)

    # 데이터베이스 설정
    database_url: str = "sqlite:///./accounts.db"

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def is_sqlite(self) -> bool:
        """SQLite 데이터베이스 사용 여부"""
        return self.database_url.startswith("sqlite")


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()
