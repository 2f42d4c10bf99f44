"""대화형 에이전트 루프와 공유하는 값 열거형

히스토리 저장 여부 판단에는 사용하지 않는다 (정책은 호출자 몫).
"""

from enum import Enum


class StrEnum(str, Enum):
    """문자열 값 Enum (Python 3.11 미만 호환)"""

    def __str__(self) -> str:
        return self.value


class ReviewDecision(StrEnum):
    """명령 실행 검토 결과"""

    YES = "yes"
    NO_CONTINUE = "no-continue"
    NO_EXIT = "no-exit"
    # 이번 세션 동안 같은 명령을 자동 승인
    ALWAYS = "always"
    # 결정 전에 명령 설명 요청
    EXPLAIN = "explain"


class AutoApprovalMode(StrEnum):
    """자동 승인 모드"""

    SUGGEST = "suggest"
    AUTO_EDIT = "auto-edit"
    FULL_AUTO = "full-auto"


class FullAutoErrorMode(StrEnum):
    """full-auto 모드에서 명령 실패 시 처리 방식"""

    ASK_USER = "ask-user"
    IGNORE_AND_CONTINUE = "ignore-and-continue"
