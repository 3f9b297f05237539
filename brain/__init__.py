# -*- coding: utf-8 -*-
"""
brain 패키지

NFL 질문에 답하는 스페인어 챗봇의 "응답 결정 엔진" 핵심 로직 모음입니다.

외부(예: app_fastapi.py, routers/chat.py)에서는 보통 아래만 직접 사용합니다.

- run_pipeline_once(text, history):
    질문 한 번을 받아 욕설/인사/주제 판단, 빠른 규칙, 웹 검색 요약까지
    차례로 시도하고 {"stage", "reply", ...} 결과를 돌려줍니다. (async)
- NflEngine:
    어휘/규칙/검색 함수/응답 선택 함수를 바꿔 끼울 수 있는 엔진 클래스.

세부 로직은 다음 모듈로 나뉘어 있습니다.

- utils_text   : 입력 정규화(Message), 키워드/패턴 포함 여부
- vocabulary   : 인사·욕설·NFL 키워드와 고정 응답 문구
- safety       : 욕설 감지
- greeting     : 인사 감지, 응답 후보 선택
- classifier   : NFL / NFL 이외 주제 분류, 도메인 밖 질문 정책
- rules_nfl    : 빠른 규칙(패턴 → 고정 답변), 앞에 있는 규칙 우선
- synthesizer  : 검색 결과 조각 → 200~400자 답변
- nfl_engine   : 위 단계를 순서대로 묶는 엔진
"""

from .nfl_engine import NflEngine, EngineResult, Stage, run_pipeline_once

__all__ = ["NflEngine", "EngineResult", "Stage", "run_pipeline_once"]
