# -*- coding: utf-8 -*-
"""
NFL 챗봇 응답 엔진

한 번의 질문을 받아 아래 순서대로 판단하고, 응답 문자열 하나를 돌려준다.

  빈 입력 → 욕설 → 인사 → 주제(NFL 여부) → 빠른 규칙 → 웹 검색 + 요약 → fallback

각 단계는 최종 응답을 만들거나 다음 단계로 넘긴다.
응답을 만든 뒤의 단계는 실행 자체를 하지 않는다 (검색 호출 포함).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from core.config import OFF_DOMAIN_POLICY
from core.logging import logger
from services.web_search import SearchFragment, search_web

from .classifier import OffDomainPolicy, TopicClass, classify_topic
from .greeting import Chooser, default_chooser, is_greeting, pick_reply
from .rules_nfl import QUICK_RULES, QuickRule, match_quick_rule
from .safety import contains_insult
from .synthesizer import build_answer_from_fragments
from .utils_text import Message, normalize_input
from .vocabulary import DEFAULT_REPLIES, DEFAULT_VOCABULARY, ReplyBook, Vocabulary

SearchFn = Callable[[str], Awaitable[Sequence[SearchFragment]]]


class Stage(str, Enum):
    EMPTY_PROMPT = "empty_prompt"
    SAFETY_REPLY = "safety_reply"
    GREETING_REPLY = "greeting_reply"
    DOMAIN_REFUSAL = "domain_refusal"
    RULE_REPLY = "rule_reply"
    SEARCH_REPLY = "search_reply"
    DOMAIN_FALLBACK = "domain_fallback"
    GENERIC_FALLBACK = "generic_fallback"


@dataclass(frozen=True)
class EngineResult:
    stage: Stage
    reply: str
    topic: Optional[TopicClass] = None
    rule_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage.value,
            "reply": self.reply,
            "topic": self.topic.value if self.topic else None,
            "rule_id": self.rule_id,
        }


async def _default_search(query: str) -> List[SearchFragment]:
    return await search_web(query)


@dataclass
class NflEngine:
    """
    대화 엔진 본체.

    어휘/규칙/멘트는 읽기 전용 설정이라 요청 간에 공유해도 안전하다.
    search, chooser 는 테스트에서 가짜 함수로 바꿔 끼울 수 있다.
    """

    vocabulary: Vocabulary = DEFAULT_VOCABULARY
    replies: ReplyBook = DEFAULT_REPLIES
    rules: Tuple[QuickRule, ...] = QUICK_RULES
    policy: OffDomainPolicy = OffDomainPolicy.STRICT
    search: SearchFn = field(default=_default_search)
    chooser: Chooser = field(default=default_chooser)

    def __post_init__(self) -> None:
        self.policy = OffDomainPolicy.parse(self.policy)
        self.rules = tuple(self.rules)

        # 응답 후보 묶음이 비어 있으면 요청 처리 중이 아니라 생성 시점에 실패
        for name in ("greetings", "domain_fallbacks", "generic_fallbacks"):
            if not getattr(self.replies, name):
                raise ValueError(f"ReplyBook.{name} must not be empty")

    # -------------------------------------------------------------
    # 공개 API
    # -------------------------------------------------------------
    async def respond(
        self,
        text: Any,
        history: Optional[List[Dict[str, str]]] = None,
    ) -> EngineResult:
        """
        질문 1건 처리. 어떤 경우에도 예외를 밖으로 던지지 않고
        응답(EngineResult)을 하나 돌려준다.

        history 는 받아만 두고 현재 단계들에서는 사용하지 않는다.
        """
        try:
            return await self._run_stages(normalize_input(text))
        except Exception:
            logger.exception("NFL engine failed unexpectedly; using technical-error reply")
            return EngineResult(
                stage=Stage.GENERIC_FALLBACK,
                reply=self.replies.technical_error or DEFAULT_REPLIES.technical_error,
            )

    async def reply(self, text: Any, history: Optional[List[Dict[str, str]]] = None) -> str:
        result = await self.respond(text, history)
        return result.reply

    # -------------------------------------------------------------
    # 단계별 처리
    # -------------------------------------------------------------
    async def _run_stages(self, message: Message) -> EngineResult:
        # 1) 빈 입력
        if message.is_empty:
            return EngineResult(Stage.EMPTY_PROMPT, self.replies.empty_prompt)

        lower = message.lower

        # 2) 욕설
        if contains_insult(lower, self.vocabulary.insult_patterns):
            return EngineResult(Stage.SAFETY_REPLY, self.replies.safety)

        # 3) 인사
        if is_greeting(lower, self.vocabulary.greeting_keywords):
            return EngineResult(Stage.GREETING_REPLY, self._pick(self.replies.greetings))

        # 4) 주제 분류
        topic = classify_topic(lower, self.vocabulary.domain_keywords)
        if topic is TopicClass.NON_NFL and self.policy is OffDomainPolicy.STRICT:
            return EngineResult(Stage.DOMAIN_REFUSAL, self.replies.domain_refusal, topic=topic)

        # 5) 빠른 규칙
        rule = match_quick_rule(lower, self.rules)
        if rule is not None:
            return EngineResult(Stage.RULE_REPLY, rule.answer, topic=topic, rule_id=rule.id)

        # 6) 웹 검색 + 요약
        answer = await self._search_and_synthesize(message.original)
        if answer:
            return EngineResult(Stage.SEARCH_REPLY, answer, topic=topic)

        # 7) fallback (주제에 따라 멘트 톤이 다름)
        if topic is TopicClass.NFL:
            return EngineResult(
                Stage.DOMAIN_FALLBACK, self._pick(self.replies.domain_fallbacks), topic=topic
            )
        return EngineResult(
            Stage.GENERIC_FALLBACK, self._pick(self.replies.generic_fallbacks), topic=topic
        )

    async def _search_and_synthesize(self, query: str) -> Optional[str]:
        fragments = await self.search(query)
        if not fragments:
            return None
        return build_answer_from_fragments(
            fragments, link_label=self.replies.more_details_label
        )

    def _pick(self, pool: Sequence[str]) -> str:
        return pick_reply(pool, self.chooser)


# -------------------------------------------------------------
# 모듈 단위 엔트리 포인트
# -------------------------------------------------------------
_default_engine: Optional[NflEngine] = None


def get_engine() -> NflEngine:
    """환경설정(core.config)을 반영한 기본 엔진. 처음 호출할 때 만든다."""
    global _default_engine
    if _default_engine is None:
        _default_engine = NflEngine(policy=OffDomainPolicy.parse(OFF_DOMAIN_POLICY))
    return _default_engine


async def run_pipeline_once(
    text: Any,
    history: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    """질문 한 번 → {"stage", "reply", "topic", "rule_id"} dict."""
    result = await get_engine().respond(text, history)
    return result.to_dict()
