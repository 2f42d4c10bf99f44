"""프롬프트 자동완성 모듈

- '/' 로 시작하면 슬래시 명령어
- 그 외에는 이전에 기록된 명령어 (최근 것 먼저)
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion

from ..repository import PromptHistoryRepository
from .commands import get_command_descriptions


class SlashCompleter(Completer):
    """슬래시 명령어 자동완성 (commands 레지스트리 사용)"""

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        if not text.startswith("/"):
            return

        cmd_text = text[1:].lower()
        for name, desc in get_command_descriptions():
            if name.startswith(cmd_text):
                yield Completion(
                    name,
                    start_position=-len(cmd_text),
                    display=f"/{name}",
                    display_meta=desc,
                )


class RecordedCommandCompleter(Completer):
    """기록된 명령어 자동완성

    입력 중인 텍스트로 시작하는 과거 명령어를 최근 순서로 한 번씩 제안한다.
    빈 입력이나 완전히 같은 명령어는 제안하지 않는다.
    """

    def __init__(self, prompt_history: PromptHistoryRepository):
        self.prompt_history = prompt_history

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        if not text.strip() or text.startswith("/"):
            return

        seen: set[str] = set()
        for recorded in reversed(self.prompt_history.get_entries()):
            if recorded in seen or recorded == text or not recorded.startswith(text):
                continue
            seen.add(recorded)
            yield Completion(
                recorded,
                start_position=-len(text),
                display_meta="히스토리",
            )


class PromptCompleter(Completer):
    """슬래시 명령어 + 기록된 명령어 자동완성"""

    def __init__(self, prompt_history: PromptHistoryRepository):
        self._slash = SlashCompleter()
        self._recorded = RecordedCommandCompleter(prompt_history)

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        if document.text_before_cursor.startswith("/"):
            yield from self._slash.get_completions(document, complete_event)
        else:
            yield from self._recorded.get_completions(document, complete_event)
