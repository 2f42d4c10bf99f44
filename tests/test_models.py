"""데이터 모델 및 공유 열거형 테스트"""

import dataclasses

import pytest

from cmd_history.enums import AutoApprovalMode, FullAutoErrorMode, ReviewDecision
from cmd_history.models import (
    DEFAULT_HISTORY_CONFIG,
    HistoryConfig,
    HistoryEntry,
)


def test_history_entry_is_immutable():
    entry = HistoryEntry(command="ls", timestamp=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.command = "pwd"  # type: ignore[misc]


def test_history_entry_to_dict():
    entry = HistoryEntry(command="ls", timestamp=1700000000000)
    assert entry.to_dict() == {"command": "ls", "timestamp": 1700000000000}


def test_history_entry_from_dict_defaults_timestamp():
    """timestamp가 없거나 잘못되면 0"""
    assert HistoryEntry.from_dict({"command": "ls"}).timestamp == 0
    assert HistoryEntry.from_dict({"command": "ls", "timestamp": "x"}).timestamp == 0
    assert HistoryEntry.from_dict({"command": "ls", "timestamp": 12.7}).timestamp == 12
    assert HistoryEntry.from_dict({"command": "ls", "timestamp": float("inf")}).timestamp == 0
    assert HistoryEntry.from_dict({"command": "ls", "timestamp": float("nan")}).timestamp == 0


def test_history_entry_from_dict_rejects_non_string_command():
    with pytest.raises(ValueError):
        HistoryEntry.from_dict({"command": 42, "timestamp": 1})


def test_default_history_config():
    assert DEFAULT_HISTORY_CONFIG.max_size == 1000
    assert DEFAULT_HISTORY_CONFIG.save_history is True
    assert DEFAULT_HISTORY_CONFIG.sensitive_patterns == ()


def test_history_config_rejects_non_positive_max_size():
    with pytest.raises(ValueError):
        HistoryConfig(max_size=0)


def test_history_config_freezes_patterns():
    cfg = HistoryConfig(sensitive_patterns=["a", "b"])  # type: ignore[arg-type]
    assert cfg.sensitive_patterns == ("a", "b")


def test_enum_values():
    """공유 어휘 문자열 값 확인"""
    assert [d.value for d in ReviewDecision] == [
        "yes",
        "no-continue",
        "no-exit",
        "always",
        "explain",
    ]
    assert [m.value for m in AutoApprovalMode] == ["suggest", "auto-edit", "full-auto"]
    assert [m.value for m in FullAutoErrorMode] == ["ask-user", "ignore-and-continue"]
    assert str(AutoApprovalMode.FULL_AUTO) == "full-auto"
    assert ReviewDecision("no-exit") is ReviewDecision.NO_EXIT
