# -*- coding: utf-8 -*-
"""
brain.greeting

인사말 감지 + 인사 응답 선택.

- is_greeting(text): 인사 키워드 포함 여부 (단순 부분 문자열 포함)
- pick_reply(pool, chooser): 응답 후보 중 하나 선택.
  chooser 는 기본 random.choice 이고, 테스트에서는 lambda pool: pool[0]
  처럼 고정된 함수를 넣는다.
"""

from __future__ import annotations

import random
from typing import Callable, Iterable, Sequence

from .utils_text import contains_any
from .vocabulary import DEFAULT_VOCABULARY

Chooser = Callable[[Sequence[str]], str]

default_chooser: Chooser = random.choice


def is_greeting(
    message_lower: str,
    keywords: Iterable[str] = DEFAULT_VOCABULARY.greeting_keywords,
) -> bool:
    return contains_any(message_lower, keywords)


def pick_reply(pool: Sequence[str], chooser: Chooser = default_chooser) -> str:
    if not pool:
        raise ValueError("reply pool is empty")
    return chooser(pool)
