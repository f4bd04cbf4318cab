"""
로깅 설정

표준 logging 모듈을 사용합니다. 각 모듈은 logging.getLogger(__name__)으로
로거를 얻고, 애플리케이션 기동 시 configure_logging()이 루트 로거를 설정합니다.
"""

import logging

from accounts.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """설정된 log_level로 루트 로거를 구성합니다."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)

    # SQL 로그는 DEBUG 모드에서만 출력
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level <= logging.DEBUG else logging.WARNING
    )
