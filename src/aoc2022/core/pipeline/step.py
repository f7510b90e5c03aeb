# src/aoc2022/core/pipeline/step.py
"""
Contrato canônico de Solver do aoc2022.

Um Solver é a unidade executável de um dia: recebe o texto bruto da entrada,
produz uma estrutura parseada específica do puzzle e calcula as respostas
das duas partes sobre essa estrutura.

Princípios fundamentais:
    - Solvers não conhecem o Engine nem a CLI
    - Solvers não leem arquivos; o texto chega pronto via Engine
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - Cada Solver possui um `id` único (ex.: "day07")
    - `part_1` e `part_2` não mutam o puzzle parseado, de modo que um único
      parse serve às duas partes
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from .types import Answer


@runtime_checkable
class Solver(Protocol):
    """
    Contrato canônico de um Solver diário.

    Atributos obrigatórios:
        - id: identificador único e estável (ex.: "day01")
        - day: número do dia
        - title: título do puzzle

    Falhas esperadas são levantadas como `AocException` (InputParseError,
    SimulationError, NoSolutionFound). O Engine converte qualquer exceção em
    um resultado FAILED.
    """
    id: str
    day: int
    title: str

    def parse(self, text: str) -> Any:
        """Converte o texto da entrada na estrutura do puzzle."""
        ...

    def part_1(self, puzzle: Any, params: Dict[str, Any]) -> Answer:
        ...

    def part_2(self, puzzle: Any, params: Dict[str, Any]) -> Answer:
        ...
