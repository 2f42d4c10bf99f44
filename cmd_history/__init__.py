"""cmd-history - 민감한 명령어를 걸러 저장하는 명령어 히스토리"""

from .models import (
    DEFAULT_HISTORY_CONFIG,
    DEFAULT_HISTORY_SIZE,
    HistoryConfig,
    HistoryEntry,
    RecoverableError,
    StorageResult,
)
from .redaction import RedactionFilter, is_sensitive_command
from .repository import HistoryStore

__all__ = [
    "DEFAULT_HISTORY_CONFIG",
    "DEFAULT_HISTORY_SIZE",
    "HistoryConfig",
    "HistoryEntry",
    "RecoverableError",
    "StorageResult",
    "RedactionFilter",
    "is_sensitive_command",
    "HistoryStore",
]
