# -*- coding: utf-8 -*-
"""
brain.vocabulary

NFL 챗봇이 사용하는 "고정 어휘 / 고정 멘트" 설정 모음.

- Vocabulary : 인사말 키워드, 욕설 패턴, NFL 도메인 키워드
- ReplyBook  : 단계별로 돌려주는 스페인어 응답 문구 (인사/거절/fallback 등)

모두 프로세스 전체에서 공유하는 읽기 전용 데이터이므로 tuple / frozen
dataclass 로 만든다. 테스트에서는 dataclasses.replace() 로 일부만 바꿔서
엔진에 주입하면 된다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Pattern, Tuple

from .utils_text import compile_patterns


# ------------------------------------------------------------
# 1. 도메인(NFL) 키워드
# ------------------------------------------------------------

NFL_KEYWORDS: Tuple[str, ...] = (
    "nfl",
    "fútbol americano",
    "futbol americano",
    "super bowl",
    "superbowl",
    "touchdown",
    "field goal",
    "gol de campo",
    "safety",
    "primero y diez",
    "1ro y 10",
    "quarterback",
    "mariscal de campo",
    "linebacker",
    "receiver",
    "wide receiver",
    "running back",
    # 팀 이름
    "patriots",
    "patriotas",
    "cowboys",
    "steelers",
    "packers",
    "chiefs",
    "eagles",
    "49ers",
    "jets",
    "giants",
    "raiders",
    "broncos",
    "bills",
    "ravens",
    "bengals",
    "browns",
    "vikings",
    "seahawks",
    "buccaneers",
    "bucs",
)

# ------------------------------------------------------------
# 2. 인사말 / 욕설
# ------------------------------------------------------------

GREETING_KEYWORDS: Tuple[str, ...] = (
    "hola",
    "holis",
    "holaa",
    "buenas",
    "buenos días",
    "buenas tardes",
    "buenas noches",
    "que onda",
    "qué onda",
    "hey",
    "hi",
    "hello",
)

INSULT_PATTERNS: Tuple[str, ...] = (
    r"idiota",
    r"tonto",
    r"estúpido",
    r"pendejo",
    r"imbécil",
    r"menso",
    r"no sirves",
)


@dataclass(frozen=True)
class Vocabulary:
    """키워드 기반 판정에 쓰이는 어휘 묶음."""

    greeting_keywords: Tuple[str, ...] = GREETING_KEYWORDS
    domain_keywords: Tuple[str, ...] = NFL_KEYWORDS
    insult_patterns: Tuple[Pattern[str], ...] = field(
        default_factory=lambda: compile_patterns(INSULT_PATTERNS)
    )


# ------------------------------------------------------------
# 3. 응답 문구
# ------------------------------------------------------------

@dataclass(frozen=True)
class ReplyBook:
    """단계별 응답 문구. 여러 개인 경우 chooser 가 하나를 고른다."""

    empty_prompt: str = (
        "Por favor escribe algo sobre la NFL y con gusto te respondo. "
        "Por ejemplo: “¿Cómo se anotan puntos?” o “¿Qué es un primero y diez?”."
    )

    safety: str = (
        "Entiendo que puedas estar molesto, pero mantengamos el respeto. "
        "Puedo ayudarte con reglas, equipos, campeonatos y datos curiosos de la NFL si quieres."
    )

    greetings: Tuple[str, ...] = (
        "Hola, ¿sobre qué aspecto de la NFL te gustaría saber? "
        "Puedo explicarte reglas de juego, equipos, Super Bowl o campeonatos.",
        "¡Hola! Pregúntame lo que quieras sobre la NFL: reglas, castigos, equipos o el Super Bowl.",
        "¡Qué tal! Estoy aquí para hablar de fútbol americano. "
        "¿Quieres saber cómo se anotan puntos o qué es un primero y diez?",
    )

    domain_refusal: str = (
        "Por ahora solo puedo responder preguntas relacionadas con la NFL y el fútbol americano profesional. "
        "Intenta preguntarme sobre reglas de juego, equipos, Super Bowl o campeonatos."
    )

    # NFL 질문인데 규칙/검색 모두 실패한 경우
    domain_fallbacks: Tuple[str, ...] = (
        "No encontré una respuesta exacta para esa pregunta, pero si quieres puedo explicarte reglas básicas como "
        "cómo se anotan puntos, qué es un primero y diez o cuáles son los castigos más comunes en la NFL.",
    )

    # 도메인 밖 질문(soft 정책)인데 규칙/검색 모두 실패한 경우
    generic_fallbacks: Tuple[str, ...] = (
        "No pude encontrar una respuesta para eso. "
        "Intenta de nuevo o hazme otra pregunta sobre la NFL.",
        "No tengo información sobre ese tema. "
        "Recuerda que puedo ayudarte con reglas, equipos y campeonatos de la NFL.",
    )

    # 엔진 내부에서 예기치 못한 오류가 난 경우 (채팅 위젯의 오류 문구와 동일)
    technical_error: str = (
        "Hubo un problema técnico al procesar tu mensaje. "
        "Intenta de nuevo o hazme otra pregunta sobre la NFL."
    )

    # 검색 결과 뒤에 붙이는 출처 안내
    more_details_label: str = "Más detalles en:"


DEFAULT_VOCABULARY = Vocabulary()
DEFAULT_REPLIES = ReplyBook()
