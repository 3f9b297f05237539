# -*- coding: utf-8 -*-
"""
brain.utils_text

챗봇 입력 텍스트 공통 유틸 모듈.

역할
----
- normalize_text(raw): 어떤 값이 오든 앞뒤 공백을 제거한 문자열로 변환
- normalize_input(raw): 원문(trim)과 소문자 버전을 함께 담은 Message 생성
- contains_any(text, keywords): 키워드 리스트 중 하나라도 포함되는지 체크
- matches_any(text, patterns): 정규식 패턴 중 하나라도 걸리는지 체크

이 모듈은 다른 brain 모듈들에서만 공통으로 사용한다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Pattern


# ------------------------------------------------------------
# 1. 요청 1건 단위의 메시지
# ------------------------------------------------------------

@dataclass(frozen=True)
class Message:
    """한 번의 요청에서만 쓰이는 불변 메시지.

    - raw      : 요청 바디에 들어온 값 그대로 (None, 숫자 등 가능)
    - original : 앞뒤 공백 제거한 원문 (검색 질의에 사용)
    - lower    : original 의 소문자 버전 (모든 키워드/규칙 매칭에 사용)
    """

    raw: Any
    original: str
    lower: str

    @property
    def is_empty(self) -> bool:
        return not self.original


# ------------------------------------------------------------
# 2. 정규화 함수들
# ------------------------------------------------------------

def normalize_text(raw: Any) -> str:
    """None → "", 그 외 값은 str() 후 앞뒤 공백 제거."""
    if raw is None:
        return ""
    return str(raw).strip()


def normalize_input(raw: Any) -> Message:
    """
    사용자 입력을 Message 로 변환.
    소문자 변환 외의 가공(특수문자 제거 등)은 하지 않는다.
    '¿' 나 악센트가 규칙 패턴에 그대로 들어 있기 때문.
    """
    original = normalize_text(raw)
    return Message(raw=raw, original=original, lower=original.lower())


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """
    text 안에 keywords 중 하나라도 포함되어 있으면 True.
    이미 소문자로 바뀐 텍스트라는 가정하에 단순 포함 체크만 한다.
    """
    if not text:
        return False

    return any(kw in text for kw in keywords)


def matches_any(text: str, patterns: Iterable[Pattern[str]]) -> bool:
    """컴파일된 정규식 중 하나라도 text 에서 search 되면 True."""
    if not text:
        return False

    return any(p.search(text) for p in patterns)


def compile_patterns(raw_patterns: Iterable[str]) -> tuple:
    """문자열 패턴 목록을 대소문자 무시 정규식 튜플로 컴파일."""
    return tuple(re.compile(p, re.IGNORECASE) for p in raw_patterns)
