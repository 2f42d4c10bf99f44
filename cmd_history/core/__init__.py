"""핵심 모듈

공통으로 사용되는 설정과 로깅 유틸리티를 제공합니다.
"""

from .config import DEFAULT_HISTORY_FILE, Config, config
from .log import setup_logging

__all__ = [
    # config
    "DEFAULT_HISTORY_FILE",
    "Config",
    "config",
    # log
    "setup_logging",
]
