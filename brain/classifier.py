# brain/classifier.py
# -*- coding: utf-8 -*-
"""
질문 주제 분류 모듈 (NFL / NFL 이외).

역할
----
- classify_topic(text):
    NFL 키워드가 하나라도 들어 있으면 "nfl", 아니면 "non-nfl".
- OffDomainPolicy:
    NFL 이외 주제를 어떻게 다룰지에 대한 정책.
    STRICT 는 바로 거절, SOFT 는 검색까지 해 보고 fallback 멘트만 바꾼다.

주의
----
- 여기서는 '주제'만 정한다. 실제로 거절할지, 검색을 할지는
  nfl_engine 쪽에서 정책(OffDomainPolicy)을 보고 결정한다.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

from .utils_text import contains_any
from .vocabulary import DEFAULT_VOCABULARY


class TopicClass(str, Enum):
    NFL = "nfl"
    NON_NFL = "non-nfl"


class OffDomainPolicy(str, Enum):
    STRICT = "strict"
    SOFT = "soft"

    @classmethod
    def parse(cls, value: Union[str, "OffDomainPolicy", None]) -> "OffDomainPolicy":
        """환경변수 문자열 → 정책. 모르는 값이면 STRICT."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.STRICT


def classify_topic(
    message_lower: str,
    keywords: Iterable[str] = DEFAULT_VOCABULARY.domain_keywords,
) -> TopicClass:
    """소문자 메시지를 보고 NFL 관련 질문인지 결정."""
    text = message_lower.lower()
    if contains_any(text, keywords):
        return TopicClass.NFL
    return TopicClass.NON_NFL
