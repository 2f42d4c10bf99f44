from __future__ import annotations

from pathlib import Path

import pytest

from cmd_history.models import RecoverableError
from cmd_history.repository import HistoryStore
from tests.e2e_helpers import build_cli_env, make_session_log, spawn_cli


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    """아직 존재하지 않는 하위 디렉토리의 히스토리 파일"""
    return tmp_path / "home" / ".codex" / "history.json"


@pytest.fixture
def errors() -> list[RecoverableError]:
    """저장소 관찰자가 받은 오류 목록"""
    return []


@pytest.fixture
def store(history_path: Path, errors: list[RecoverableError]) -> HistoryStore:
    return HistoryStore(history_path, on_error=errors.append)


@pytest.fixture
def e2e_env(tmp_path: Path) -> dict[str, str]:
    return build_cli_env(tmp_path)


@pytest.fixture
def session_log(tmp_path: Path):
    log = make_session_log(tmp_path)
    yield log
    log.close()


@pytest.fixture
def cli_process(repo_root: Path, e2e_env: dict[str, str], session_log):
    child = spawn_cli(env=e2e_env, cwd=repo_root, logfile=session_log.tee)
    yield child, session_log
    if child.isalive():
        # 테스트 종료 시 프로세스를 정리한다.
        child.terminate(force=True)
