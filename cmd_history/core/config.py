"""설정 관리 모듈"""

import json
import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from ..models import DEFAULT_HISTORY_SIZE, HistoryConfig

# .env 파일 로드
load_dotenv()

DEFAULT_HISTORY_FILE = Path.home() / ".codex" / "history.json"

_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_max_size(raw: str | None) -> int:
    """CMD_HISTORY_MAX_SIZE 해석 (잘못된 값이면 기본값)"""
    if raw is None or not raw.strip():
        return DEFAULT_HISTORY_SIZE
    try:
        value = int(raw)
    except ValueError:
        logger.warning("CMD_HISTORY_MAX_SIZE 값이 정수가 아닙니다: {!r}", raw)
        return DEFAULT_HISTORY_SIZE
    if value <= 0:
        logger.warning("CMD_HISTORY_MAX_SIZE 값은 양수여야 합니다: {}", value)
        return DEFAULT_HISTORY_SIZE
    return value


def _read_patterns(raw: str | None) -> tuple[str, ...]:
    """CMD_HISTORY_SENSITIVE_PATTERNS(JSON 배열) 해석"""
    if raw is None or not raw.strip():
        return ()
    try:
        patterns = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("CMD_HISTORY_SENSITIVE_PATTERNS 값이 JSON이 아닙니다")
        return ()
    if not isinstance(patterns, list) or not all(
        isinstance(p, str) for p in patterns
    ):
        logger.warning("CMD_HISTORY_SENSITIVE_PATTERNS 값은 문자열 배열이어야 합니다")
        return ()
    return tuple(patterns)


class Config:
    """환경 변수 기반 설정

    히스토리 파일과 로그 디렉토리는 실제로 쓸 때 생성된다.
    """

    def __init__(self) -> None:
        self.HISTORY_FILE = Path(
            os.getenv("CMD_HISTORY_FILE", str(DEFAULT_HISTORY_FILE))
        ).expanduser()
        self.HISTORY_MAX_SIZE = _read_max_size(os.getenv("CMD_HISTORY_MAX_SIZE"))
        self.SAVE_HISTORY = (
            os.getenv("CMD_HISTORY_SAVE", "1").strip().lower() not in _FALSE_VALUES
        )
        self.SENSITIVE_PATTERNS = _read_patterns(
            os.getenv("CMD_HISTORY_SENSITIVE_PATTERNS")
        )
        self.LOG_DIR = Path(os.getenv("CMD_HISTORY_LOG_DIR", "logs")).expanduser()

    def history_config(self) -> HistoryConfig:
        """저장소 호출에 넘길 HistoryConfig 생성"""
        return HistoryConfig(
            max_size=self.HISTORY_MAX_SIZE,
            save_history=self.SAVE_HISTORY,
            sensitive_patterns=self.SENSITIVE_PATTERNS,
        )


config = Config()
