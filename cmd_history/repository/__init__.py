"""Repository 모듈 공개 API"""

from .command_history import ErrorObserver, HistoryStore, now_millis
from .prompt_history import PromptHistoryRepository, RecordedHistory

__all__ = [
    "ErrorObserver",
    "HistoryStore",
    "now_millis",
    "PromptHistoryRepository",
    "RecordedHistory",
]
