# -*- coding: utf-8 -*-
"""
brain.synthesizer

웹 검색 결과 조각(SearchFragment)들을 이어 붙여서
200~400자 정도 길이의 답변 한 덩어리로 만드는 모듈.

처리 순서
--------
1) 상위 3개 결과만 사용. snippet 이 있으면 snippet, 하나도 없으면 title.
2) snippet 은 공백 하나로, title 은 ". " 로 이어 붙임.
3) "..." 같은 말줄임표 제거 + 연속 공백 정리.
4) 400자보다 길면 400자에서 자르고, 200자 이후에 문장 끝(. ! ?)이 있으면
   거기까지만 남김.
5) 그렇게 잘라서 200자보다 짧아졌는데 원문은 200자 이상이었으면
   문장 경계보다 길이를 우선해서 원문을 다시 최대 400자까지 자름.
6) 첫 번째 결과의 링크가 있고 길이가 여유 있으면 "Más detalles en: <link>" 추가.

입력이 같으면 결과도 항상 같다 (랜덤/외부 호출 없음).
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from services.web_search import SearchFragment

MAX_LEN = 400
MIN_LEN = 200
LINK_THRESHOLD = 360
TOP_N = 3
MORE_DETAILS_LABEL = "Más detalles en:"

_ELLIPSIS_RE = re.compile(r"\.{3,}")
_SPACES_RE = re.compile(r"\s+")


def _non_empty(values: Sequence[Optional[str]]) -> List[str]:
    return [v for v in values if isinstance(v, str) and v.strip()]


def clean_text(text: str) -> str:
    """말줄임표 제거 + 공백 정리."""
    text = _ELLIPSIS_RE.sub("", text)
    text = _SPACES_RE.sub(" ", text)
    return text.strip()


def combine_fragments(fragments: Sequence[SearchFragment]) -> str:
    """상위 결과의 snippet(없으면 title)을 이어 붙인 정리 전 문자열."""
    top = list(fragments)[:TOP_N]

    snippets = _non_empty([f.snippet for f in top])
    if snippets:
        return " ".join(snippets)

    titles = _non_empty([f.title for f in top])
    if titles:
        return ". ".join(titles)

    return ""


def trim_to_length(text: str, max_len: int = MAX_LEN, min_len: int = MIN_LEN) -> str:
    """
    길이 제한 적용 (4, 5단계).

    예) 500자 문자열에 250번째 글자가 '.' 이면 → 251자 (마침표 포함)
        문장 끝이 200자 이후에 없으면 → 정확히 400자
    """
    original = text

    if len(text) > max_len:
        text = text[:max_len]
        last_punct = max(text.rfind("."), text.rfind("!"), text.rfind("?"))
        if last_punct >= min_len:
            text = text[: last_punct + 1]

    if len(text) < min_len and len(original) >= min_len:
        text = original[: min(max_len, len(original))]

    return text


def primary_link(fragments: Sequence[SearchFragment]) -> str:
    if not fragments:
        return ""
    first = fragments[0]
    return first.link or first.source or ""


def build_answer_from_fragments(
    fragments: Sequence[SearchFragment],
    max_len: int = MAX_LEN,
    min_len: int = MIN_LEN,
    link_threshold: int = LINK_THRESHOLD,
    link_label: str = MORE_DETAILS_LABEL,
) -> Optional[str]:
    """
    검색 결과 조각들 → 최종 답변 문자열.
    쓸 만한 텍스트가 하나도 없으면 None.
    """
    if not fragments:
        return None

    fragments = list(fragments)
    combined = clean_text(combine_fragments(fragments))
    if not combined:
        return None

    text = trim_to_length(combined, max_len=max_len, min_len=min_len)

    link = primary_link(fragments)
    if link and len(text) < link_threshold:
        with_link = f"{text} {link_label} {link}"
        if len(with_link) <= max_len:
            text = with_link

    return text
