# -*- coding: utf-8 -*-
"""
main.py

이 파일은 "NFL 챗봇" 백엔드 데모의 진입점입니다.

🎯 역할 요약
--------------------------------------
1. 콘솔 텍스트 모드
   - 터미널에서 직접 질문을 입력
   - brain/nfl_engine.py만 사용 (HTTP 서버 없이 엔진 동작 확인)

2. 서버 모드
   - app_fastapi.py 의 FastAPI 앱을 uvicorn 으로 실행
   - 채팅 위젯은 POST /api/chat 으로 메시지를 보냅니다.

👉 SERPAPI_KEY 가 .env 에 없으면 웹 검색 단계는 건너뛰고
   규칙 답변 / fallback 멘트만 나옵니다.
"""

import sys
import asyncio
import json
from typing import List, Dict

from brain.nfl_engine import run_pipeline_once
from core.config import HOST, PORT


# =====================================================================
#  모드 1: 콘솔 텍스트 데모
# =====================================================================
def run_text_mode():
    """
    콘솔에서 질문을 입력받아
    nfl_engine 의 결과(stage / reply)를 확인하는 모드입니다.
    """
    print("\n[모드 1] NFL 챗봇 텍스트 데모 (exit로 종료)")
    history: List[Dict[str, str]] = []

    while True:
        try:
            text = input("\n질문 > ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n종료합니다.")
            break

        if text.lower() in ("exit", "quit"):
            print("종료합니다.")
            break

        result = asyncio.run(run_pipeline_once(text, history))

        print("\n[단계]", result["stage"], "| 주제:", result["topic"] or "-")
        if result["rule_id"]:
            print("[규칙]", result["rule_id"])
        print("[응답]", result["reply"])
        print("FE:" + json.dumps(result, ensure_ascii=False))

        history.append({"role": "user", "content": text})
        history.append({"role": "bot", "content": result["reply"]})


# =====================================================================
#  모드 2: HTTP 서버
# =====================================================================
def run_server_mode():
    import uvicorn

    uvicorn.run("app_fastapi:app", host=HOST, port=PORT)


# =====================================================================
#  메인 진입점
# =====================================================================

def main():
    """
    main.py의 진입점 함수.

    `python main.py serve` 면 바로 서버 모드, 인자가 없으면 모드 선택.
    """
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        run_server_mode()
        return

    print("===== NFL 챗봇 백엔드 데모 =====")
    print("1) 텍스트 챗봇 엔진")
    print("2) HTTP 서버 실행")
    print("0) 종료")

    while True:
        mode = input("\n실행 모드를 선택하세요 (1/2/0) > ").strip()
        if mode == "1":
            run_text_mode()
            break
        elif mode == "2":
            run_server_mode()
            break
        elif mode == "0":
            print("종료합니다.")
            break
        else:
            print("잘못된 입력입니다. 1, 2, 0 중에서 선택해 주세요.")


if __name__ == "__main__":
    main()
