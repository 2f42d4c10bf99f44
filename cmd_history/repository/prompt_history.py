"""Short Term 저장소: 프롬프트 입력 히스토리 관리"""

from prompt_toolkit.history import History, InMemoryHistory

from ..models import HistoryEntry


class RecordedHistory(InMemoryHistory):
    """기록된 명령어만 담는 InMemoryHistory

    PromptSession은 입력 확정 시 Buffer.append_to_history()로 append_string을
    호출한다. 여기서는 무시하고, record_string으로 들어온 항목만 남긴다
    (민감한 명령어·슬래시 명령어 제외, 중복 방지).
    """

    def append_string(self, string: str) -> None:
        pass

    def record_string(self, string: str) -> None:
        super().append_string(string)


class PromptHistoryRepository:
    """RecordedHistory 래핑 - 방향키 탐색용

    파일 히스토리(HistoryStore)에서 읽은 항목을 prompt_toolkit에 채워 넣는다.
    내부 구현(_storage) 노출 없이 관리
    """

    def __init__(self) -> None:
        self._history = RecordedHistory()

    def get_history(self) -> History:
        """prompt_toolkit History 객체 반환 (PromptSession용)"""
        return self._history

    def add_entry(self, text: str) -> None:
        """히스토리 항목 추가"""
        self._history.record_string(text)

    def clear(self) -> None:
        """히스토리 초기화

        다음 프롬프트에서 Buffer.reset()이 히스토리를 다시 읽으므로
        방향키 목록도 함께 비워진다.
        """
        self._history._storage.clear()
        self._history._loaded_strings.clear()

    def load_from_entries(self, entries: list[HistoryEntry]) -> None:
        """저장된 항목으로 히스토리 갱신 (기존 내용 대체, 시간순 입력)"""
        self.clear()
        for entry in entries:
            self.add_entry(entry.command)

    def get_entries(self) -> list[str]:
        """모든 히스토리 항목 반환 (시간순)"""
        return list(self._history._storage)
