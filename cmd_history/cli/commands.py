"""슬래시 명령어 처리"""

from datetime import datetime
from typing import Awaitable, Callable

from rich.console import Console
from rich.table import Table

from ..models import DEFAULT_HISTORY_CONFIG, HistoryConfig, HistoryEntry
from ..redaction import RedactionFilter
from ..repository import HistoryStore, PromptHistoryRepository

# 모듈 레벨 명령어 레지스트리: {name: (handler, description)}
_commands: dict[str, tuple[Callable[..., Awaitable[None]], str]] = {}


def get_command_names() -> list[str]:
    """등록된 명령어 목록 반환"""
    return sorted(_commands.keys())


def get_command_descriptions() -> list[tuple[str, str]]:
    """(명령어, 설명) 목록 반환 (이름순)"""
    return [(name, desc) for name, (_, desc) in sorted(_commands.items())]


def _format_timestamp(timestamp: int) -> str:
    """epoch millis를 로컬 시각 문자열로 변환 (범위 밖이면 숫자 그대로)"""
    try:
        when = datetime.fromtimestamp(timestamp / 1000)
    except (OSError, OverflowError, ValueError):
        return str(timestamp)
    return when.strftime("%Y-%m-%d %H:%M:%S")


def command(name: str, description: str = ""):
    """명령어 등록 데코레이터"""

    def decorator(func: Callable[..., Awaitable[None]]):
        _commands[name] = (func, description)
        return func

    return decorator


class CommandHandler:
    """슬래시 명령어와 명령어 기록을 처리하는 클래스"""

    def __init__(
        self,
        console: Console,
        store: HistoryStore,
        prompt_history: PromptHistoryRepository | None = None,
        history_config: HistoryConfig = DEFAULT_HISTORY_CONFIG,
    ):
        self.console = console
        self.store = store
        self.prompt_history = prompt_history or PromptHistoryRepository()
        self.history_config = history_config
        self._entries: list[HistoryEntry] = []
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def entries(self) -> list[HistoryEntry]:
        """현재 세션이 알고 있는 히스토리 (복사본)"""
        return list(self._entries)

    async def load(self) -> None:
        """세션 시작 시 파일 히스토리 로드"""
        self._entries = await self.store.load()
        self.prompt_history.load_from_entries(self._entries)

    async def record(self, text: str) -> bool:
        """입력된 명령어 기록. 새 항목이 추가되면 True 반환"""
        updated = await self.store.append(text, self._entries, self.history_config)
        if updated is self._entries:
            return False
        self._entries = updated
        self.prompt_history.add_entry(text)
        return True

    def is_sensitive(self, text: str) -> bool:
        return RedactionFilter(self.history_config.sensitive_patterns).is_sensitive(
            text
        )

    async def handle(self, command: str) -> bool:
        """명령어 처리. 알려진 명령어면 True 반환"""
        parts = command[1:].strip().split(maxsplit=1)  # '/' 제거
        cmd = parts[0].lower() if parts else ""
        arg = parts[1] if len(parts) > 1 else ""

        if cmd in _commands:
            handler, _ = _commands[cmd]
            await handler(self, arg)
            return True

        self.console.print(f"[red]알 수 없는 명령어: {cmd}[/red]")
        self.console.print("[dim]/help 로 사용 가능한 명령어를 확인하세요[/dim]")
        return False

    @command("help", "도움말 표시")
    async def _show_help(self, _: str = "") -> None:
        """도움말 출력"""
        table = Table(title="사용 가능한 명령어")
        table.add_column("명령어", style="cyan")
        table.add_column("설명", style="green")

        for name, desc in get_command_descriptions():
            table.add_row(f"/{name}", desc)

        self.console.print(table)

    @command("history", "저장된 명령어 히스토리 표시")
    async def _show_history(self, _: str = "") -> None:
        """파일에 저장된 히스토리 출력"""
        entries = await self.store.load()
        if not entries:
            self.console.print("[yellow]히스토리가 비어있습니다[/yellow]")
            return

        table = Table(title="명령어 히스토리", caption=str(self.store.path))
        table.add_column("#", style="dim", width=4)
        table.add_column("시각", style="green")
        table.add_column("명령어", style="white")

        for idx, entry in enumerate(entries, 1):
            table.add_row(str(idx), _format_timestamp(entry.timestamp), entry.command)

        self.console.print(table)

    @command("clear", "명령어 히스토리 삭제")
    async def _clear_history(self, _: str = "") -> None:
        """히스토리 파일과 방향키 히스토리 초기화"""
        result = await self.store.clear()
        if not result.ok:
            self.console.print(
                f"[red]히스토리 초기화 실패: {result.error.message}[/red]"  # type: ignore[union-attr]
            )
            return

        self._entries = []
        self.prompt_history.clear()
        self.console.print("[green]히스토리를 초기화했습니다[/green]")

    @command("exit", "프로그램 종료")
    async def _exit(self, _: str = "") -> None:
        """프로그램 종료"""
        self._running = False
        self.console.print("[blue]프로그램을 종료합니다[/blue]")
