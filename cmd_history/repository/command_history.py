"""Long Term 저장소: 명령어 히스토리 JSON 파일 관리

파일 하나에 HistoryEntry 배열을 통째로 저장한다.
공개 메서드는 예외를 밖으로 내보내지 않는다 (로그 + 관찰자 통지 후 기본값 반환).
"""

from __future__ import annotations

import json
import time
from contextlib import suppress
from pathlib import Path
from typing import Callable

import aiofiles
import aiofiles.os
from loguru import logger

from ..models import (
    DEFAULT_HISTORY_CONFIG,
    HistoryConfig,
    HistoryEntry,
    RecoverableError,
    StorageResult,
)
from ..redaction import RedactionFilter

ErrorObserver = Callable[[RecoverableError], None]


def now_millis() -> int:
    """현재 시각 (epoch millis)"""
    return int(time.time() * 1000)


class HistoryStore:
    """JSON 파일 기반 명령어 히스토리 저장소

    내부 상태 없이 호출자가 넘긴 시퀀스를 변환하고 파일에 반영한다.
    단일 세션이 파일을 소유한다고 가정 (프로세스 간 잠금 없음).

    사용법:
        store = HistoryStore(Path("~/.codex/history.json").expanduser())
        entries = await store.load()
        entries = await store.append("git status", entries, config)
    """

    def __init__(
        self,
        path: Path | str,
        on_error: ErrorObserver | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._path = Path(path)
        self._on_error = on_error
        self._clock = clock or now_millis

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> list[HistoryEntry]:
        """히스토리 로드

        파일이 없거나 읽기/파싱에 실패하면 빈 리스트
        """
        try:
            if not await aiofiles.os.path.exists(self._path):
                return []
            return await self._read_entries()
        except (OSError, ValueError, RecursionError) as e:
            # RecursionError: 지나치게 깊게 중첩된 JSON
            self._report("load", e, level="WARNING")
            return []

    async def save(
        self,
        sequence: list[HistoryEntry],
        config: HistoryConfig = DEFAULT_HISTORY_CONFIG,
    ) -> StorageResult:
        """최근 max_size개만 남겨 파일 전체를 교체 저장"""
        trimmed = list(sequence)[-config.max_size :]
        try:
            await aiofiles.os.makedirs(self._path.parent, exist_ok=True)
            await self._write_json([entry.to_dict() for entry in trimmed])
        except OSError as e:
            return StorageResult.failure(self._report("save", e))
        return StorageResult.success()

    async def append(
        self,
        command: str,
        sequence: list[HistoryEntry],
        config: HistoryConfig = DEFAULT_HISTORY_CONFIG,
    ) -> list[HistoryEntry]:
        """명령어 추가 후 새 시퀀스 반환

        다음 경우에는 sequence를 그대로 반환하고 저장하지 않는다:
        - save_history가 False이거나 공백뿐인 명령어
        - 민감한 명령어 (디스크에 잠시라도 쓰지 않음)
        - 직전 항목과 완전히 같은 명령어
        저장 실패 여부와 관계없이 새 시퀀스를 반환한다.
        """
        if not config.save_history or not command.strip():
            return sequence

        if RedactionFilter(config.sensitive_patterns).is_sensitive(command):
            logger.debug("민감한 명령어로 판단되어 히스토리에 기록하지 않음")
            return sequence

        if sequence and sequence[-1].command == command:
            return sequence

        entry = HistoryEntry(command=command, timestamp=self._clock())
        new_sequence = [*sequence, entry]
        await self.save(new_sequence, config)
        return new_sequence

    async def clear(self) -> StorageResult:
        """히스토리 파일을 빈 배열로 교체 (파일이 없으면 그대로 성공)"""
        try:
            if not await aiofiles.os.path.exists(self._path):
                return StorageResult.success()
            await self._write_json([])
        except OSError as e:
            return StorageResult.failure(self._report("clear", e))
        logger.info("명령어 히스토리를 초기화했습니다: {}", self._path)
        return StorageResult.success()

    async def _read_entries(self) -> list[HistoryEntry]:
        """파일 파싱 (OSError/ValueError는 호출자에게 전파)"""
        async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
            content = await f.read()

        raw = json.loads(content)
        if not isinstance(raw, list):
            raise ValueError(f"JSON 배열이 아닙니다: {type(raw).__name__}")

        entries: list[HistoryEntry] = []
        for idx, item in enumerate(raw):
            if not isinstance(item, dict):
                logger.warning("히스토리 항목 #{} 형식 오류, 건너뜀", idx)
                continue
            try:
                entries.append(HistoryEntry.from_dict(item))
            except ValueError as e:
                logger.warning("히스토리 항목 #{} 건너뜀: {}", idx, e)
        return entries

    async def _write_json(self, data: list[dict]) -> None:
        """임시 파일에 쓴 뒤 rename (중간에 실패해도 기존 파일 유지)"""
        content = json.dumps(data, indent=2, ensure_ascii=False)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(content)
            await aiofiles.os.replace(tmp_path, self._path)
        except OSError:
            with suppress(OSError):
                await aiofiles.os.remove(tmp_path)
            raise

    def _report(
        self, operation: str, exc: Exception, level: str = "ERROR"
    ) -> RecoverableError:
        """오류 로그 기록 및 관찰자 통지"""
        error = RecoverableError(operation=operation, path=self._path, message=str(exc))
        logger.log(level, "명령어 히스토리 {} 실패 ({}): {}", operation, self._path, exc)
        if self._on_error is not None:
            self._on_error(error)
        return error
