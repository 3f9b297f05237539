from __future__ import annotations

import asyncio
import dataclasses
from typing import List, Optional, Sequence

import pytest

from brain.classifier import OffDomainPolicy, TopicClass
from brain.nfl_engine import EngineResult, NflEngine, Stage
from brain.rules_nfl import QUICK_RULES, build_rules
from brain.vocabulary import DEFAULT_REPLIES, DEFAULT_VOCABULARY
from services.web_search import SearchFragment


class FakeSearch:
    def __init__(self, fragments: Optional[Sequence[SearchFragment]] = None, error: Optional[Exception] = None) -> None:
        self.fragments = list(fragments or [])
        self.error = error
        self.queries: List[str] = []

    async def __call__(self, query: str) -> List[SearchFragment]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.fragments


def _first(pool: Sequence[str]) -> str:
    return pool[0]


def _engine(search: FakeSearch, **kwargs) -> NflEngine:
    kwargs.setdefault("chooser", _first)
    return NflEngine(search=search, **kwargs)


def _respond(engine: NflEngine, text) -> EngineResult:
    return asyncio.run(engine.respond(text, []))


@pytest.mark.parametrize("text", [None, "", "   ", "\n"])
def test_empty_input_prompts_for_question(text) -> None:
    search = FakeSearch()

    result = _respond(_engine(search), text)

    assert result.stage is Stage.EMPTY_PROMPT
    assert result.reply == DEFAULT_REPLIES.empty_prompt
    assert search.queries == []


@pytest.mark.parametrize("text", ["tonto", "hola, eres un idiota", "touchdown? no sirves"])
def test_insults_get_safety_reply_before_anything_else(text: str) -> None:
    search = FakeSearch()

    result = _respond(_engine(search), text)

    assert result.stage is Stage.SAFETY_REPLY
    assert result.reply == DEFAULT_REPLIES.safety
    assert search.queries == []


def test_greeting_reply_comes_from_pool() -> None:
    search = FakeSearch()

    result = _respond(_engine(search, chooser=lambda pool: pool[-1]), "hola")

    assert result.stage is Stage.GREETING_REPLY
    assert result.reply == DEFAULT_REPLIES.greetings[-1]
    assert search.queries == []


def test_greeting_with_default_random_chooser() -> None:
    search = FakeSearch()
    engine = NflEngine(search=search)

    replies = {asyncio.run(engine.reply("buenas noches")) for _ in range(20)}

    assert replies <= set(DEFAULT_REPLIES.greetings)
    assert search.queries == []


def test_off_domain_is_refused_without_search() -> None:
    search = FakeSearch([SearchFragment(snippet="París")])

    result = _respond(_engine(search), "¿cuál es la capital de francia?")

    assert result.stage is Stage.DOMAIN_REFUSAL
    assert result.topic is TopicClass.NON_NFL
    assert result.reply == DEFAULT_REPLIES.domain_refusal
    assert search.queries == []


def test_touchdown_question_gets_rule_answer() -> None:
    search = FakeSearch()
    expected = next(r.answer for r in QUICK_RULES if r.id == "puntos")

    result = _respond(_engine(search), "¿qué es un touchdown?")

    assert result.stage is Stage.RULE_REPLY
    assert result.rule_id == "puntos"
    assert result.reply == expected
    assert search.queries == []


def test_rule_priority_with_injected_rules() -> None:
    rules = build_rules(
        [
            {"id": "a", "patterns": ["patriots"], "answer": "respuesta A"},
            {"id": "b", "patterns": ["patriots"], "answer": "respuesta B"},
        ]
    )

    result = _respond(_engine(FakeSearch(), rules=rules), "datos de los patriots")

    assert result.reply == "respuesta A"


def test_search_answer_when_no_rule_matches() -> None:
    search = FakeSearch(
        [
            SearchFragment(
                title="Steelers",
                snippet="Los Pittsburgh Steelers tienen seis títulos de Super Bowl...",
                link="https://nfl.com/steelers",
            ),
            SearchFragment(snippet="Empatados   con los Patriots como los más ganadores."),
            SearchFragment(snippet="Su último título fue en la temporada 2008."),
        ]
    )

    result = _respond(_engine(search), "¿Cuántos anillos tienen los Steelers?")

    assert search.queries == ["¿Cuántos anillos tienen los Steelers?"]
    assert result.stage is Stage.SEARCH_REPLY
    assert result.topic is TopicClass.NFL
    assert result.reply.startswith(
        "Los Pittsburgh Steelers tienen seis títulos de Super Bowl "
        "Empatados con los Patriots como los más ganadores."
    )
    assert "..." not in result.reply
    assert 0 < len(result.reply) <= 400


def test_search_answer_respects_length_window() -> None:
    long_snippet = "Los Chiefs dominaron la temporada con una ofensiva explosiva. " * 4
    search = FakeSearch([SearchFragment(snippet=long_snippet)] * 3)

    result = _respond(_engine(search), "resumen de los steelers")

    assert result.stage is Stage.SEARCH_REPLY
    assert 200 <= len(result.reply) <= 400


def test_nfl_question_without_results_uses_domain_fallback() -> None:
    search = FakeSearch([])

    result = _respond(_engine(search), "¿cuántos anillos tienen los steelers?")

    assert result.stage is Stage.DOMAIN_FALLBACK
    assert result.reply == DEFAULT_REPLIES.domain_fallbacks[0]
    assert len(search.queries) == 1


def test_unusable_fragments_fall_back() -> None:
    search = FakeSearch([SearchFragment(snippet="...", title="")])

    result = _respond(_engine(search), "¿cuántos anillos tienen los steelers?")

    assert result.stage is Stage.DOMAIN_FALLBACK


def test_soft_policy_searches_off_domain_and_uses_generic_fallback() -> None:
    search = FakeSearch([])

    result = _respond(_engine(search, policy=OffDomainPolicy.SOFT), "¿cuál es la capital de francia?")

    assert result.stage is Stage.GENERIC_FALLBACK
    assert result.topic is TopicClass.NON_NFL
    assert result.reply == DEFAULT_REPLIES.generic_fallbacks[0]
    assert search.queries == ["¿cuál es la capital de francia?"]


def test_soft_policy_still_uses_rules() -> None:
    search = FakeSearch([])

    result = _respond(_engine(search, policy="soft"), "¿cuántos timeout hay en el basquetbol?")

    assert result.stage is Stage.RULE_REPLY
    assert result.rule_id == "tiempos_fuera"
    assert search.queries == []


def test_unexpected_failure_becomes_generic_fallback() -> None:
    search = FakeSearch(error=RuntimeError("provider exploded"))

    result = _respond(_engine(search), "¿cuántos anillos tienen los steelers?")

    assert result.stage is Stage.GENERIC_FALLBACK
    assert result.reply == DEFAULT_REPLIES.technical_error
    assert result.reply.startswith("Hubo un problema técnico")
    assert "exploded" not in result.reply


def test_failing_chooser_gets_technical_error_reply() -> None:
    def broken_chooser(pool: Sequence[str]) -> str:
        raise KeyError("no choice")

    result = _respond(_engine(FakeSearch(), chooser=broken_chooser), "hola")

    assert result.stage is Stage.GENERIC_FALLBACK
    assert result.reply == DEFAULT_REPLIES.technical_error


def test_empty_technical_error_uses_default_text() -> None:
    replies = dataclasses.replace(DEFAULT_REPLIES, technical_error="")
    search = FakeSearch(error=RuntimeError("boom"))

    result = _respond(_engine(search, replies=replies), "¿cuántos anillos tienen los steelers?")

    assert result.reply == DEFAULT_REPLIES.technical_error


@pytest.mark.parametrize("pool", ["greetings", "domain_fallbacks", "generic_fallbacks"])
def test_empty_reply_pool_is_rejected_at_construction(pool: str) -> None:
    replies = dataclasses.replace(DEFAULT_REPLIES, **{pool: ()})

    with pytest.raises(ValueError):
        NflEngine(search=FakeSearch(), replies=replies)


def test_soft_policy_no_result_never_reports_technical_problem() -> None:
    for pick in (lambda pool: pool[0], lambda pool: pool[-1]):
        search = FakeSearch([])
        engine = _engine(search, policy=OffDomainPolicy.SOFT, chooser=pick)

        result = _respond(engine, "¿cuál es la capital de francia?")

        assert result.stage is Stage.GENERIC_FALLBACK
        assert result.reply in DEFAULT_REPLIES.generic_fallbacks
        assert result.reply != DEFAULT_REPLIES.technical_error
    assert DEFAULT_REPLIES.technical_error not in DEFAULT_REPLIES.generic_fallbacks


def test_injected_vocabulary_changes_gating() -> None:
    vocabulary = dataclasses.replace(DEFAULT_VOCABULARY, domain_keywords=("béisbol",))
    search = FakeSearch([])

    nfl = _respond(_engine(search, vocabulary=vocabulary), "¿qué es un touchdown?")
    baseball = _respond(_engine(search, vocabulary=vocabulary), "reglas del béisbol")

    assert nfl.stage is Stage.DOMAIN_REFUSAL
    assert baseball.stage is Stage.DOMAIN_FALLBACK


def test_result_dict_shape() -> None:
    result = _respond(_engine(FakeSearch()), "¿qué es un touchdown?")

    assert result.to_dict() == {
        "stage": "rule_reply",
        "reply": result.reply,
        "topic": "nfl",
        "rule_id": "puntos",
    }
