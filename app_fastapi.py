# app_fastapi.py
# -*- coding: utf-8 -*-

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import HOST, PORT, OFF_DOMAIN_POLICY, SERPAPI_KEY
from core.logging import logger
from routers import chat, health

# ============================================================
# FastAPI 앱 기본 세팅 (Swagger 설명 포함)
# ============================================================

app = FastAPI(
    title="NFL 챗봇 백엔드 API",
    description="""
NFL(미식축구) 질문에 스페인어로 답하는 **단일 주제 챗봇** 백엔드 API입니다.

- 채팅 위젯(프론트)은 사용자가 입력한 문장을 `/api/chat` 으로 전송합니다.
- 이 백엔드는 문장을 기준으로
  - 욕설 / 인사 감지
  - NFL 관련 질문인지 판단
  - 내부 빠른 규칙(점수, 반칙, 타임아웃 등) 매칭
  - 규칙이 없으면 SerpAPI 웹 검색 결과를 200~400자로 요약
  을 차례로 시도하고, 항상 `reply` 하나를 돌려줍니다.
""",
    version="1.0.0",
)

# CORS: 개발 단계에서는 * 허용, 배포 시에는 도메인 제한 권장
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chat.router)

logger.info(
    f"NFL chatbot app loaded (off-domain policy={OFF_DOMAIN_POLICY}, "
    f"web search={'on' if SERPAPI_KEY else 'off'})"
)


@app.get(
    "/debug/routes",
    tags=["debug"],
    summary="현재 FastAPI에 등록된 라우트 목록 디버그용",
)
def debug_routes():
    return [r.path for r in app.routes]


# ============================================================
# uvicorn 실행용 엔트리포인트
# ============================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app_fastapi:app",
        host=HOST,
        port=PORT,
        reload=True,
    )
