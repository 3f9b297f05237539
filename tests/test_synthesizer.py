from __future__ import annotations

from brain.synthesizer import (
    MAX_LEN,
    MIN_LEN,
    build_answer_from_fragments,
    clean_text,
    trim_to_length,
)
from services.web_search import SearchFragment


def _frag(snippet: str = "", title: str = "", link: str = "", source: str = "") -> SearchFragment:
    return SearchFragment(title=title, snippet=snippet, link=link, source=source)


def test_no_fragments_gives_no_result() -> None:
    assert build_answer_from_fragments([]) is None


def test_fragments_without_text_give_no_result() -> None:
    fragments = [_frag(snippet="   ", title=""), _frag(snippet="...", title="  ")]

    # "..." 는 정리 단계에서 지워져서 남는 텍스트가 없음
    assert build_answer_from_fragments(fragments) is None


def test_snippets_are_joined_with_space() -> None:
    fragments = [_frag(snippet="Primero."), _frag(snippet="Segundo."), _frag(snippet="Tercero.")]

    assert build_answer_from_fragments(fragments) == "Primero. Segundo. Tercero."


def test_titles_used_when_no_snippet() -> None:
    fragments = [_frag(title="Chiefs campeones"), _frag(title="Resumen del partido")]

    assert build_answer_from_fragments(fragments) == "Chiefs campeones. Resumen del partido"


def test_only_top_three_fragments_are_used() -> None:
    fragments = [_frag(snippet=s) for s in ("uno", "dos", "tres", "cuatro")]

    assert build_answer_from_fragments(fragments) == "uno dos tres"


def test_ellipsis_and_whitespace_are_cleaned() -> None:
    assert clean_text("  Los Chiefs...   ganaron\n\n el .... partido ") == "Los Chiefs ganaron el partido"


def test_truncates_at_sentence_end_after_min_len() -> None:
    text = "a" * 250 + "." + "b" * 249
    assert len(text) == 500

    answer = build_answer_from_fragments([_frag(snippet=text)])

    assert answer == text[:251]
    assert answer.endswith(".")


def test_hard_truncation_without_terminator() -> None:
    answer = build_answer_from_fragments([_frag(snippet="a" * 500)])

    assert answer == "a" * MAX_LEN


def test_terminator_before_min_len_keeps_hard_cut() -> None:
    text = "a" * 100 + "." + "b" * 399

    answer = build_answer_from_fragments([_frag(snippet=text)])

    assert answer == text[:MAX_LEN]


def test_trim_leaves_short_text_alone() -> None:
    assert trim_to_length("corto.") == "corto."
    assert len(trim_to_length("x" * (MIN_LEN + 10))) == MIN_LEN + 10


def test_link_is_appended_when_it_fits() -> None:
    fragments = [_frag(snippet="Texto corto", link="https://nfl.com/a")]

    assert build_answer_from_fragments(fragments) == "Texto corto Más detalles en: https://nfl.com/a"


def test_source_is_used_when_link_missing() -> None:
    fragments = [_frag(snippet="Texto corto", source="ESPN")]

    assert build_answer_from_fragments(fragments) == "Texto corto Más detalles en: ESPN"


def test_link_dropped_when_it_would_exceed_max_len() -> None:
    text = "a" * 350
    link = "https://example.com/" + "x" * 40

    assert build_answer_from_fragments([_frag(snippet=text, link=link)]) == text


def test_link_not_added_to_long_text() -> None:
    text = "a" * 360

    assert build_answer_from_fragments([_frag(snippet=text, link="https://x.io")]) == text


def test_synthesis_is_deterministic() -> None:
    fragments = [
        _frag(snippet="Los Kansas City Chiefs ganaron el Super Bowl LVIII... en tiempo extra.", link="https://a"),
        _frag(snippet="Patrick Mahomes fue elegido MVP del partido."),
        _frag(snippet="El juego se disputó en Las Vegas."),
    ]

    answers = {build_answer_from_fragments(fragments) for _ in range(10)}

    assert len(answers) == 1
