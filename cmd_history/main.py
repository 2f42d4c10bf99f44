"""cmd-history - 실행한 명령어를 안전하게 기록하는 CLI 도구"""

import asyncio

from rich.console import Console
from prompt_toolkit import PromptSession
from prompt_toolkit.styles import Style
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.document import Document

from .core import config, setup_logging
from .repository import HistoryStore, PromptHistoryRepository
from .cli import CommandHandler, PromptCompleter, get_command_names

# prompt_toolkit 스타일 정의
prompt_style = Style.from_dict(
    {
        "prompt": "bold green",
        "completion-menu.completion": "bg:#333333 #ffffff",
        "completion-menu.completion.current": "bg:#00aa00 #000000",
        "completion-menu.meta.completion": "bg:#333333 #888888",
        "completion-menu.meta.completion.current": "bg:#00aa00 #000000",
    }
)


def _build_key_bindings() -> KeyBindings:
    """Enter=제출, Alt+Enter=줄바꿈"""
    bindings = KeyBindings()

    @bindings.add("enter")
    def _(event):
        """Enter: 단일 매칭이면 자동완성 후 제출"""
        buffer = event.current_buffer
        text = buffer.text
        if text.startswith("/"):
            parts = text[1:].split(maxsplit=1)
            cmd_part = parts[0] if parts else ""
            rest = parts[1] if len(parts) > 1 else ""

            matches = [c for c in get_command_names() if c.startswith(cmd_part)]
            if len(matches) == 1 and matches[0] != cmd_part:
                new_text = "/" + matches[0]
                if rest:
                    new_text += " " + rest
                buffer.document = Document(
                    text=new_text, cursor_position=len(new_text)
                )
        buffer.validate_and_handle()

    @bindings.add("escape", "enter")
    def _(event):
        """Alt+Enter: 줄바꿈 삽입"""
        event.current_buffer.insert_text("\n")

    return bindings


async def run(console: Console) -> None:
    """REPL 루프"""
    store = HistoryStore(config.HISTORY_FILE)
    prompt_history = PromptHistoryRepository()
    handler = CommandHandler(
        console, store, prompt_history, history_config=config.history_config()
    )
    await handler.load()

    console.print(
        f"[dim]저장된 히스토리 {len(handler.entries)}개 항목 ({store.path})[/dim]"
    )
    console.print(
        "[dim]Ctrl+C: 현재 입력 취소 | Enter: 제출 | Alt+Enter: 줄바꿈 | /: 명령어 보기[/dim]\n"
    )

    session = PromptSession(
        "> ",
        style=prompt_style,
        completer=PromptCompleter(prompt_history),
        complete_while_typing=True,
        history=prompt_history.get_history(),
        multiline=False,
        key_bindings=_build_key_bindings(),
    )

    while handler.running:
        try:
            # 방향키 ↑/↓로 이전·다음 입력 탐색 가능
            user_input = await session.prompt_async()

            if user_input.startswith("/"):
                await handler.handle(user_input)
            elif user_input.strip():
                if await handler.record(user_input):
                    console.print("[dim]기록되었습니다[/dim]")
                elif handler.is_sensitive(user_input):
                    console.print(
                        "[yellow]민감한 정보가 포함된 것으로 보여 기록하지 않았습니다[/yellow]"
                    )
                else:
                    console.print("[dim]기록하지 않았습니다[/dim]")

        except KeyboardInterrupt:
            # Ctrl+C: 현재 입력 무시하고 계속
            console.print("\n[yellow]입력이 취소되었습니다[/yellow]")
            continue
        except EOFError:
            # Ctrl+D: 종료
            console.print("\n[blue]프로그램을 종료합니다[/blue]")
            break


def main():
    setup_logging(config.LOG_DIR)
    console = Console()

    console.print("[bold cyan]cmd-history[/bold cyan]")
    asyncio.run(run(console))


if __name__ == "__main__":
    main()
