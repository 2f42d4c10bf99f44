from __future__ import annotations

from pathlib import Path

import pexpect

from tests.e2e_helpers import (
    assert_log_contains,
    assert_no_error_strings,
    build_cli_env,
    expect_prompt,
    make_session_log,
    read_history_commands,
    send_command,
    send_ctrl_d,
    send_exit,
    spawn_cli,
)


def _drain_and_assert(child: pexpect.spawn, log_text: str) -> None:
    # 종료 직후는 출력이 덮어쓰기 형태라서 전체 로그로만 검증한다.
    assert_no_error_strings(log_text)


def test_exit_command(cli_process):
    child, session_log = cli_process
    expect_prompt(child)
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)
    _drain_and_assert(child, session_log.text())


def test_ctrl_d_exit(cli_process):
    child, session_log = cli_process
    expect_prompt(child)
    send_ctrl_d(child)
    child.expect(pexpect.EOF, timeout=5)
    _drain_and_assert(child, session_log.text())


def test_help_command(cli_process):
    child, session_log = cli_process
    expect_prompt(child)
    child.sendline("/help")
    expect_prompt(child)
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)
    assert_log_contains(session_log.text(), "/help", "/history", "/clear", "/exit")
    _drain_and_assert(child, session_log.text())


def test_history_empty(cli_process):
    child, session_log = cli_process
    expect_prompt(child)
    child.sendline("/history")
    expect_prompt(child)
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)
    assert_log_contains(session_log.text(), "히스토리가 비어있습니다")
    _drain_and_assert(child, session_log.text())


def test_unknown_command(cli_process):
    child, session_log = cli_process
    expect_prompt(child)
    child.sendline("/nope")
    child.expect("알 수 없는 명령어", timeout=5)
    expect_prompt(child)
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)
    _drain_and_assert(child, session_log.text())


def test_records_commands_and_skips_sensitive(cli_process, tmp_path: Path):
    child, session_log = cli_process
    expect_prompt(child)
    send_command(child, "git status", "기록되었습니다")
    send_command(child, "git status", "기록하지 않았습니다")
    send_command(child, "export SECRET=xyz", "민감한 정보")
    send_command(child, "ls", "기록되었습니다")
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)

    assert read_history_commands(tmp_path) == ["git status", "ls"]
    _drain_and_assert(child, session_log.text())


def test_history_survives_restart(repo_root: Path, tmp_path: Path):
    env = build_cli_env(tmp_path)

    first_log = make_session_log(tmp_path, "first.log")
    child = spawn_cli(env=env, cwd=repo_root, logfile=first_log.tee)
    try:
        expect_prompt(child)
        send_command(child, "make test", "기록되었습니다")
        send_exit(child)
        child.expect(pexpect.EOF, timeout=5)
    finally:
        if child.isalive():
            child.terminate(force=True)
        first_log.close()

    # 두 번째 세션은 파일에서 이전 기록을 읽어온다.
    second_log = make_session_log(tmp_path, "second.log")
    child = spawn_cli(env=env, cwd=repo_root, logfile=second_log.tee)
    try:
        child.expect("1개 항목", timeout=10)
        expect_prompt(child)
        child.sendline("/history")
        child.expect("make test", timeout=5)
        expect_prompt(child)
        send_exit(child)
        child.expect(pexpect.EOF, timeout=5)
    finally:
        if child.isalive():
            child.terminate(force=True)
        second_log.close()
    assert_no_error_strings(first_log.text())
    assert_no_error_strings(second_log.text())


def test_clear_command(cli_process, tmp_path: Path):
    child, session_log = cli_process
    expect_prompt(child)
    send_command(child, "ls", "기록되었습니다")
    send_command(child, "/clear", "히스토리를 초기화했습니다")
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)

    assert read_history_commands(tmp_path) == []
    _drain_and_assert(child, session_log.text())


def test_ctrl_c_stays_alive(cli_process):
    child, session_log = cli_process
    expect_prompt(child)
    child.sendcontrol("c")
    child.expect("입력이 취소되었습니다", timeout=5)
    expect_prompt(child)
    send_exit(child)
    child.expect(pexpect.EOF, timeout=5)
    _drain_and_assert(child, session_log.text())
