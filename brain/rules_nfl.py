# -*- coding: utf-8 -*-
"""
rules_nfl.py

NFL 기본 규칙 질문을 외부 검색 없이 바로 답하기 위한 "빠른 규칙" 모음.

- QUICK_RULES_CONFIG: (id, 패턴 목록, 고정 답변) 원본 설정
- build_rules(config): 설정을 QuickRule 튜플로 컴파일
- match_quick_rule(text, rules): 위에서부터 순서대로 보고
  패턴이 하나라도 걸리는 첫 번째 규칙을 반환 (없으면 None)

규칙 순서가 곧 우선순위이다. 예를 들어 "touchdown" 과 "punto extra" 가
같이 들어 있으면 앞에 있는 'puntos' 규칙이 이긴다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Pattern, Tuple

from .utils_text import compile_patterns


@dataclass(frozen=True)
class QuickRule:
    id: str
    patterns: Tuple[Pattern[str], ...]
    answer: str

    def matches(self, message_lower: str) -> bool:
        return any(p.search(message_lower) for p in self.patterns)


QUICK_RULES_CONFIG: List[Dict[str, Any]] = [
    {
        "id": "reglas_basicas",
        "patterns": [
            r"reglas básicas",
            r"reglas de la nfl",
            r"cómo se juega la nfl",
            r"explica la nfl",
        ],
        "answer": (
            "Un partido de la NFL se juega entre dos equipos de 11 jugadores en el campo. "
            "El objetivo es avanzar el balón por el campo hasta la zona de anotación del rival. "
            "Cada equipo dispone de cuatro intentos (downs) para avanzar al menos 10 yardas; "
            "si lo logra, obtiene un nuevo primero y diez. "
            "El partido se divide en cuatro cuartos de 15 minutos, con una pausa más larga en el medio tiempo."
        ),
    },
    {
        "id": "puntos",
        "patterns": [
            r"anotar puntos",
            r"puntos en la nfl",
            r"formas de anotar",
            r"cómo se anotan puntos",
            r"touchdown",
            r"field goal",
            r"gol de campo",
            r"safety",
        ],
        "answer": (
            "En la NFL se pueden anotar puntos de varias formas: un touchdown vale 6 puntos y se consigue "
            "llevando el balón a la zona de anotación rival o atrapándolo dentro de ella. "
            "Después de un touchdown, el equipo puede patear un punto extra (1 punto) o intentar una "
            "conversión de dos puntos desde la yarda 2. "
            "Un gol de campo (field goal) vale 3 puntos y se logra pateando el balón entre los postes. "
            "Un safety vale 2 puntos y ocurre cuando la defensa derriba al rival con el balón dentro de su "
            "propia zona de anotación."
        ),
    },
    {
        "id": "conversion",
        "patterns": [
            r"conversión de dos puntos",
            r"conversión de 2 puntos",
            r"intento de dos puntos",
            r"punto extra",
        ],
        "answer": (
            "Después de un touchdown, el equipo anotador puede elegir entre patear un punto extra (1 punto) "
            "o intentar una conversión de dos puntos. "
            "En la conversión de dos puntos, la ofensiva tiene una sola jugada desde la línea cercana a la "
            "zona de anotación (generalmente la yarda 2) para volver a entrar con el balón a la end zone. "
            "Si lo logra, obtiene 2 puntos adicionales; si falla, no suma puntos extra."
        ),
    },
    {
        "id": "primero_y_diez",
        "patterns": [
            r"primero y diez",
            r"1ro y 10",
            r"primer down",
            r"primer y diez",
        ],
        "answer": (
            "El concepto de primero y diez en la NFL indica que la ofensiva tiene cuatro intentos (downs) "
            "para avanzar al menos 10 yardas desde el punto de inicio de la serie. "
            "Si en esos cuatro intentos avanza las 10 yardas o más, se le concede un nuevo primero y diez "
            "y la cuenta de downs se reinicia. "
            "Si no logra avanzar lo suficiente, normalmente entrega el balón al otro equipo, ya sea por "
            "despeje (punt) o porque se quedó corto en cuarto down."
        ),
    },
    {
        "id": "holding",
        "patterns": [
            r"holding",
            r"sujeci[oó]n",
            r"agarrar la camiseta",
        ],
        "answer": (
            "El holding es un castigo que ocurre cuando un jugador sujeta ilegalmente a un oponente para "
            "impedirle avanzar. "
            "En la ofensiva, suele marcarse cuando un liniero ofensivo agarra o jala a un defensor fuera de "
            "las zonas permitidas, lo que normalmente implica una penalización de 10 yardas desde el punto "
            "de la falta. "
            "En la defensa, también puede sancionarse si se impide de forma ilegal el movimiento de un "
            "jugador elegible para recibir pase."
        ),
    },
    {
        "id": "offside_false_start",
        "patterns": [
            r"offside",
            r"fuera de lugar",
            r"salida en falso",
            r"false start",
        ],
        "answer": (
            "El offside (fuera de lugar) se marca cuando un jugador defensivo cruza la línea de golpeo antes "
            "de que inicie la jugada y obtiene ventaja indebida. "
            "La salida en falso (false start) se marca cuando un jugador ofensivo se mueve de forma ilegal "
            "antes del inicio de la jugada, simulando el snap. "
            "Ambos castigos suelen penalizarse con 5 yardas en contra del equipo infractor."
        ),
    },
    {
        "id": "interferencia_pase",
        "patterns": [
            r"interferencia de pase",
            r"pass interference",
        ],
        "answer": (
            "La interferencia de pase ocurre cuando un jugador impide de manera ilegal que un receptor tenga "
            "la oportunidad de atrapar un pase. "
            "En la interferencia defensiva, se sanciona a la defensa por sujetar, empujar o cubrir al "
            "receptor antes de que el balón llegue, y generalmente la penalización lleva el balón al lugar "
            "de la falta y concede primero y diez automático. "
            "La interferencia ofensiva se marca cuando el receptor u otro jugador ofensivo empuja o bloquea "
            "ilegalmente al defensivo para crear una ventaja, y suele penalizarse con 10 yardas contra la "
            "ofensiva."
        ),
    },
    {
        "id": "tiempos_fuera",
        "patterns": [
            r"tiempos? fuera",
            r"timeout",
        ],
        "answer": (
            "Cada equipo en la NFL dispone de tres tiempos fuera por mitad para detener el reloj y reagruparse. "
            "Los tiempos fuera se usan para administrar el reloj de juego, cambiar la estrategia o evitar "
            "penalizaciones por retraso de juego. "
            "Una vez usados los tres tiempos fuera en esa mitad, el equipo ya no puede detener el reloj de "
            "esta forma hasta la siguiente mitad."
        ),
    },
    {
        "id": "duracion_partido",
        "patterns": [
            r"cuánto dura un partido",
            r"duración del partido",
            r"cuartos de la nfl",
        ],
        "answer": (
            "Un partido de la NFL se divide en cuatro cuartos de 15 minutos cada uno, con un descanso más "
            "largo en el medio tiempo (entre el segundo y el tercer cuarto). "
            "El reloj se detiene en diversas situaciones, como pases incompletos, jugadas que terminan fuera "
            "del campo, castigos y tiempos fuera. "
            "Por eso, la duración real de un partido suele rondar entre dos y tres horas."
        ),
    },
    {
        "id": "playoffs_superbowl",
        "patterns": [
            r"playoffs",
            r"postemporada",
            r"super bowl",
            r"superbowl",
        ],
        "answer": (
            "Los playoffs de la NFL son la fase de postemporada donde los mejores equipos de cada conferencia "
            "compiten en formato de eliminación directa. "
            "Los ganadores de la Conferencia Americana (AFC) y la Conferencia Nacional (NFC) se enfrentan en "
            "el Super Bowl, que es el partido final por el campeonato. "
            "El Super Bowl es uno de los eventos deportivos y mediáticos más importantes del mundo."
        ),
    },
]


def build_rules(rules_config: Iterable[Dict[str, Any]]) -> Tuple[QuickRule, ...]:
    """
    설정 dict 목록을 QuickRule 튜플로 변환.
    enabled=False 인 규칙은 건너뛰고, 순서는 그대로 유지한다.
    """
    compiled: List[QuickRule] = []
    for rule in rules_config:
        if not rule.get("enabled", True):
            continue
        compiled.append(
            QuickRule(
                id=rule["id"],
                patterns=compile_patterns(rule.get("patterns", []) or []),
                answer=rule["answer"],
            )
        )
    return tuple(compiled)


QUICK_RULES: Tuple[QuickRule, ...] = build_rules(QUICK_RULES_CONFIG)


def match_quick_rule(
    message_lower: str,
    rules: Iterable[QuickRule] = QUICK_RULES,
) -> Optional[QuickRule]:
    """첫 번째로 걸리는 규칙 반환. 아무것도 없으면 None."""
    for rule in rules:
        if rule.matches(message_lower):
            return rule
    return None
