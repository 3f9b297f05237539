# core/config.py
# -*- coding: utf-8 -*-

import os
from pathlib import Path

from dotenv import load_dotenv

# .env 로드 (가장 먼저 실행)
load_dotenv()

# --------------------------------
# 경로 / 로그 디렉터리 설정
# --------------------------------

# 프로젝트 루트 디렉토리
BASE_DIR = Path(__file__).resolve().parent.parent

# 로그 디렉터리
LOG_DIR = Path(os.getenv("NFL_LOG_DIR", str(BASE_DIR / "data" / "logs")))
LOG_DIR.mkdir(parents=True, exist_ok=True)

# 세션별 JSONL 이벤트 로그 on/off ("0", "false", "no" 면 끔)
ENABLE_EVENT_LOG = os.getenv("ENABLE_EVENT_LOG", "1").strip().lower() not in ("0", "false", "no")

# --------------------------------
# 서버 설정
# --------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# --------------------------------
# 외부 검색 API (SerpAPI)
# --------------------------------

# 키가 없으면 웹 검색 단계는 항상 "결과 없음"으로 동작한다 (서버는 정상 구동)
SERPAPI_KEY = os.getenv("SERPAPI_KEY")
SERPAPI_URL = os.getenv("SERPAPI_URL", "https://serpapi.com/search.json")

# 검색 결과 언어 힌트 (hl 파라미터)
SERPAPI_LOCALE = os.getenv("SERPAPI_LOCALE", "es")

# 요청 타임아웃(초). 타임아웃은 "검색 결과 0건"과 동일하게 처리됨
SERPAPI_TIMEOUT = float(os.getenv("SERPAPI_TIMEOUT", "8.0"))

# 검색어 앞에 붙이는 도메인 한정어 (NFL 쪽 결과로 치우치게)
SEARCH_QUERY_PREFIX = os.getenv("SEARCH_QUERY_PREFIX", "NFL")

# --------------------------------
# 대화 엔진 정책
# --------------------------------

# NFL 이외 주제 처리 방식
#   - strict : 바로 거절 멘트 (검색/규칙 단계 실행 안 함)  ← 기본값
#   - soft   : 규칙/검색까지 시도하고, 실패 시 일반 fallback 멘트
OFF_DOMAIN_POLICY = os.getenv("NFL_OFF_DOMAIN_POLICY", "strict").strip().lower()
