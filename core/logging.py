# core/logging.py
# -*- coding: utf-8 -*-

import re
import sys
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .config import LOG_DIR, ENABLE_EVENT_LOG

# ------------------------------------------------
# 터미널 출력용 logger
# ------------------------------------------------
logger = logging.getLogger("nfl_chatbot")
logger.setLevel(logging.DEBUG)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


# 세션 ID 는 파일 이름으로 쓰이므로 영문/숫자/_/- 만 허용
SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_safe_session_id(session_id: Any) -> bool:
    return isinstance(session_id, str) and bool(SESSION_ID_PATTERN.match(session_id))


def log_event(session_id: str, payload: Dict[str, Any]) -> None:
    """
    사후 분석용 JSONL 로그 기록.
    세션별로 1줄씩 쌓임.

    로그 파일 쓰기 실패는 대화 응답에 영향을 주면 안 되므로
    경고만 남기고 넘어간다.
    """
    if not ENABLE_EVENT_LOG:
        return

    if not is_safe_session_id(session_id):
        logger.warning(f"event log skipped: invalid session id {session_id!r}")
        return

    ts = datetime.now(timezone.utc).isoformat()
    log_path = LOG_DIR / f"{session_id}.jsonl"

    record = {
        "timestamp": ts,
        "session_id": session_id,
        **payload,
    }

    try:
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except (OSError, ValueError) as e:
        logger.warning(f"event log write failed ({log_path}): {e}")
