# -*- coding: utf-8 -*-
"""
brain.safety

욕설/공격적 표현 감지. 걸리면 엔진은 다른 단계를 보지 않고
진정시키는 고정 멘트(ReplyBook.safety)로 바로 응답한다.
"""

from __future__ import annotations

from typing import Iterable, Pattern

from .utils_text import matches_any
from .vocabulary import DEFAULT_VOCABULARY


def contains_insult(
    message_lower: str,
    patterns: Iterable[Pattern[str]] = DEFAULT_VOCABULARY.insult_patterns,
) -> bool:
    """소문자 메시지에 욕설 패턴이 하나라도 있으면 True."""
    return matches_any(message_lower, patterns)
