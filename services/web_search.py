# services/web_search.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, field_validator

from core.config import (
    SERPAPI_KEY,
    SERPAPI_URL,
    SERPAPI_LOCALE,
    SERPAPI_TIMEOUT,
    SEARCH_QUERY_PREFIX,
)
from core.logging import logger


# ============================================================
# Pydantic 모델
# ============================================================

class SearchFragment(BaseModel):
    """검색 결과 1건 (organic_results 의 한 항목)."""

    title: str = ""
    snippet: str = ""
    link: str = ""
    source: str = ""

    @field_validator("title", "snippet", "link", "source", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        # 공급자가 null / 숫자 등을 줄 때가 있어서 문자열로 통일
        if v is None:
            return ""
        if isinstance(v, str):
            return v
        return str(v)


# ============================================================
# 1) 응답 파싱
# ============================================================

def parse_organic_results(data: Any) -> List[SearchFragment]:
    """
    SerpAPI JSON → SearchFragment 리스트.
    구조가 예상과 다르면 빈 리스트를 돌려준다 (예외 X).
    """
    if not isinstance(data, dict):
        logger.warning("SerpAPI response is not a JSON object; ignoring")
        return []

    organic = data.get("organic_results") or []
    if not isinstance(organic, list):
        logger.warning("SerpAPI organic_results is not a list; ignoring")
        return []

    fragments: List[SearchFragment] = []
    for item in organic:
        if not isinstance(item, dict):
            continue
        fragments.append(
            SearchFragment(
                title=item.get("title"),
                snippet=item.get("snippet"),
                link=item.get("link"),
                source=item.get("source"),
            )
        )
    return fragments


def build_query(query: str, prefix: str = SEARCH_QUERY_PREFIX) -> str:
    """검색어 앞에 도메인 한정어(NFL)를 붙인다."""
    query = (query or "").strip()
    if not prefix:
        return query
    return f"{prefix} {query}".strip()


# ============================================================
# 2) SerpAPI 호출
# ============================================================

async def search_web(
    query: str,
    api_key: Optional[str] = SERPAPI_KEY,
    url: str = SERPAPI_URL,
    locale: str = SERPAPI_LOCALE,
    prefix: str = SEARCH_QUERY_PREFIX,
    timeout: float = SERPAPI_TIMEOUT,
    client: Optional[httpx.AsyncClient] = None,
) -> List[SearchFragment]:
    """
    SerpAPI 로 웹 검색을 해서 상위 결과 조각들을 돌려준다.

    키 없음 / HTTP 오류 / 타임아웃 / 이상한 응답 / 결과 0건
    → 전부 빈 리스트. 이 함수 밖으로 예외를 던지지 않는다.

    client 를 넘기면 그 클라이언트를 그대로 쓴다 (테스트에서 MockTransport 주입용).
    """
    if not api_key:
        logger.warning("SERPAPI_KEY 가 설정되지 않아 웹 검색을 건너뜁니다.")
        return []

    params: Dict[str, str] = {
        "q": build_query(query, prefix),
        "hl": locale,
        "api_key": api_key,
    }

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                res = await own_client.get(url, params=params)
        else:
            res = await client.get(url, params=params, timeout=timeout)

        if res.status_code < 200 or res.status_code >= 300:
            logger.error(f"SerpAPI HTTP error: {res.status_code} {res.text[:200]}")
            return []

        data = res.json()
    except httpx.TimeoutException as e:
        logger.warning(f"SerpAPI timeout: {e!r}")
        return []
    except httpx.HTTPError as e:
        logger.error(f"SerpAPI request failed: {e!r}")
        return []
    except ValueError as e:
        # JSON 디코딩 실패
        logger.error(f"SerpAPI returned malformed JSON: {e}")
        return []

    fragments = parse_organic_results(data)
    if not fragments:
        logger.info(f"SerpAPI: no organic results for {params['q']!r}")
    return fragments
