"""데이터 모델 정의"""

import math
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HISTORY_SIZE = 1000


@dataclass(frozen=True)
class HistoryEntry:
    """실행된 명령어 한 건 (생성 후 변경 불가)"""

    command: str
    timestamp: int  # epoch millis

    def to_dict(self) -> dict:
        return {"command": self.command, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        """파일에서 읽은 항목 복원

        command가 문자열이 아니면 ValueError. timestamp가 없거나
        유한한 숫자가 아니면 (Infinity, NaN 포함) 0으로 읽는다.
        """
        command = data.get("command")
        if not isinstance(command, str):
            raise ValueError(f"command 필드가 문자열이 아닙니다: {command!r}")

        timestamp = data.get("timestamp", 0)
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            timestamp = 0
        elif not math.isfinite(timestamp):
            timestamp = 0
        return cls(command=command, timestamp=int(timestamp))


@dataclass(frozen=True)
class HistoryConfig:
    """히스토리 저장 정책 (호출자가 매 호출마다 전달, 저장되지 않음)

    Attributes:
        max_size: 파일에 남길 최대 항목 수
        save_history: False면 append가 아무것도 기록하지 않음
        sensitive_patterns: 기본 규칙에 더해 검사할 정규식 원문 목록
    """

    max_size: int = DEFAULT_HISTORY_SIZE
    save_history: bool = True
    sensitive_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.max_size <= 0:
            raise ValueError(f"max_size는 양수여야 합니다: {self.max_size}")
        # list로 넘겨도 불변 설정으로 보관
        object.__setattr__(self, "sensitive_patterns", tuple(self.sensitive_patterns))


DEFAULT_HISTORY_CONFIG = HistoryConfig()


@dataclass(frozen=True)
class RecoverableError:
    """흡수된 저장소 오류 (로그 및 관찰자 전달용)"""

    operation: str  # "load" | "save" | "clear"
    path: Path
    message: str


@dataclass(frozen=True)
class StorageResult:
    """save/clear 결과"""

    ok: bool
    error: RecoverableError | None = None

    @classmethod
    def success(cls) -> "StorageResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: RecoverableError) -> "StorageResult":
        return cls(ok=False, error=error)
