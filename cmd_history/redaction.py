"""민감한 명령어 판별 모듈

기본 규칙(고정) + 사용자 규칙(설정)을 OR로 결합한 판별기.
- 기본 규칙: 20자 이상 토큰형 문자열, password/secret/token/key 단어
- 사용자 규칙: 정규식 원문 목록, 컴파일 실패한 패턴은 조용히 건너뜀

부수 효과 없는 순수 함수로 동작한다 (I/O, 로깅 없음).
"""

import re
from functools import lru_cache
from typing import Iterable

# 기본 민감 패턴 (설정으로 변경 불가)
BUILTIN_SENSITIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # 단어 경계는 ASCII 기준 (한글·악센트 문자 옆도 경계로 취급)
    # API 키/토큰으로 보이는 20자 이상의 영숫자, 하이픈, 밑줄 연속
    re.compile(r"\b[A-Za-z0-9\-_]{20,}\b", re.ASCII),
    re.compile(r"\bpassword\b", re.ASCII | re.IGNORECASE),
    re.compile(r"\bsecret\b", re.ASCII | re.IGNORECASE),
    re.compile(r"\btoken\b", re.ASCII | re.IGNORECASE),
    re.compile(r"\bkey\b", re.ASCII | re.IGNORECASE),
)


@lru_cache(maxsize=256)
def compile_pattern(source: str) -> re.Pattern[str] | None:
    """사용자 패턴 컴파일 (실패 시 None)"""
    try:
        return re.compile(source)
    except re.error:
        return None


class RedactionFilter:
    """명령어 민감도 판별기

    사용 예시:
        redaction = RedactionFilter(["--api-key=\\S+"])
        if redaction.is_sensitive(command):
            # 히스토리에 기록하지 않음
            pass
    """

    def __init__(self, extra_patterns: Iterable[str] = ()):
        self.extra_patterns = tuple(extra_patterns)
        self._compiled = tuple(
            pattern
            for pattern in (compile_pattern(src) for src in self.extra_patterns)
            if pattern is not None
        )

    @property
    def rules(self) -> tuple[re.Pattern[str], ...]:
        """적용되는 전체 규칙 (기본 규칙 먼저)"""
        return BUILTIN_SENSITIVE_PATTERNS + self._compiled

    def is_sensitive(self, command: str) -> bool:
        """하나라도 매칭되면 True"""
        return any(rule.search(command) for rule in self.rules)


def is_sensitive_command(
    command: str, additional_patterns: Iterable[str] = ()
) -> bool:
    """민감도 판별 단축 함수"""
    return RedactionFilter(additional_patterns).is_sensitive(command)
