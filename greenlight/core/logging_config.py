# greenlight/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """루트 로거 설정"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL 로그는 db_echo 설정으로만 켠다
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
