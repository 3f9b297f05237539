# routers/chat.py
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field, field_validator

from brain.nfl_engine import get_engine
from core.logging import log_event, is_safe_session_id, logger

router = APIRouter()


class HistoryItem(BaseModel):
    role: str = ""
    content: str = ""


class ChatRequest(BaseModel):
    """
    채팅 한 턴 요청 바디.
    - message: 사용자가 입력한 문장 (없거나 비어 있어도 400 대신 안내 멘트로 응답)
    - history: 프론트에서 쌓아 둔 대화 기록 (현재 엔진은 사용하지 않음)
    - session_id: 이벤트 로그 파일 이름용. 없거나 형식이 맞지 않으면 새로 만든다.
    """

    message: Optional[Any] = Field(
        default=None,
        description="사용자 메시지. 문자열이 아니면 문자열로 변환해서 처리합니다.",
        examples=["¿Qué es un touchdown?"],
    )
    history: Optional[List[HistoryItem]] = Field(default=None)
    session_id: Optional[str] = Field(
        default=None,
        description="영문/숫자/_/- 1~64자. 그 외 값은 무시하고 새 ID를 발급합니다.",
    )

    @field_validator("session_id", mode="before")
    @classmethod
    def _drop_unsafe_session_id(cls, v: Any) -> Optional[str]:
        # 로그 파일 경로에 들어가므로 형식이 안 맞으면 None 으로 바꿔 새로 발급
        if v is None or is_safe_session_id(v):
            return v
        logger.warning(f"invalid session_id ignored: {v!r}")
        return None


class ChatResponse(BaseModel):
    reply: str


@router.post(
    "/api/chat",
    response_model=ChatResponse,
    summary="NFL 챗봇 한 턴 처리",
    tags=["chat"],
)
async def chat(body: ChatRequest):
    session_id = body.session_id or str(uuid.uuid4())
    history: List[Dict[str, str]] = [h.model_dump() for h in (body.history or [])]

    result = await get_engine().respond(body.message, history)

    # 파일 쓰기는 이벤트 루프를 막지 않도록 스레드풀에서
    await run_in_threadpool(
        log_event,
        session_id,
        {
            "type": "chat_turn",
            "input_text": None if body.message is None else str(body.message),
            "history_len": len(history),
            "engine_result": result.to_dict(),
        },
    )

    return ChatResponse(reply=result.reply)
