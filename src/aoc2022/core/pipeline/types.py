# src/aoc2022/core/pipeline/types.py
"""
Tipos canônicos da execução de solvers do aoc2022.

Este módulo define as estruturas e enums que padronizam a comunicação
entre solvers, Engine, relatórios e rastreabilidade.

Componentes principais:
    - DayPart    → seleção de partes (1, 2 ou ambas)
    - PartStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - PartResult → estrutura imutável de resultado de uma parte

Invariantes:
    - Enums possuem valores textuais canônicos
    - PartResult é imutável e seguro contra mutação acidental
    - Tipos não dependem de engine, CLI ou solvers concretos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple, Union


Answer = Union[int, str]


class DayPart(str, Enum):
    """
    Seleção de partes de um dia.

    Os valores são os mesmos aceitos pela CLI (`--part 1|2|*`).
    `BOTH` não é uma parte executável: é expandido em ONE seguido de TWO.
    """
    ONE = "1"
    TWO = "2"
    BOTH = "*"

    def expand(self) -> Tuple["DayPart", ...]:
        if self is DayPart.BOTH:
            return (DayPart.ONE, DayPart.TWO)
        return (self,)

    def includes(self, part: "DayPart") -> bool:
        return part in self.expand()


class PartStatus(str, Enum):
    """
    Estados finais possíveis da execução de uma parte.

    Estados definidos:
        - SUCCESS: resposta produzida
        - SKIPPED: execução pulada por decisão explícita (ex.: config)
        - FAILED: execução interrompida por erro (entrada, parse ou simulação)

    O status é um valor final; estados em andamento não pertencem a este enum.
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class PartResult:
    """
    Resultado imutável da execução de uma parte de um dia.

    Campos:
        - day: número do dia (1..25)
        - part: parte executada (ONE ou TWO)
        - solver_id: identificador do solver (ex.: "day05")
        - status: estado final da execução
        - answer: resposta escalar (int ou str), None quando não há resposta
        - elapsed_ms: tempo de computação da parte, sem leitura/parse
        - summary: resumo textual da execução
        - warnings: avisos não fatais gerados durante a execução
        - payload: dados adicionais; em falha, `payload["error"]` contém
          um `AocErrorPayload` serializado

    Invariantes:
        - Uma instância nunca é alterada após criada
        - `answer` só é preenchido quando `status == SUCCESS`
    """
    day: int
    part: DayPart
    solver_id: str
    status: PartStatus
    answer: Answer | None = None
    elapsed_ms: float = 0.0
    summary: str = ""
    warnings: List[str] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.day}.{self.part.value}"

    @property
    def error(self) -> Dict[str, Any] | None:
        return self.payload.get("error")

    def format_value(self) -> str:
        """Texto exibido após `Day N.P:` conforme o status."""
        if self.status is PartStatus.SUCCESS:
            text = str(self.answer)
            # respostas multi-linha (imagem do CRT) começam na linha seguinte
            return "\n" + text if "\n" in text else text
        if self.status is PartStatus.SKIPPED:
            return f"skipped ({self.summary})" if self.summary else "skipped"
        err = self.error or {}
        return f"FAILED [{err.get('type', 'UNKNOWN')}] {err.get('message', self.summary)}"

    def format_line(self, *, show_timing: bool = False) -> str:
        value = self.format_value()
        sep = "" if value.startswith("\n") else " "
        line = f"Day {self.label}:{sep}{value}"
        if show_timing and self.status is PartStatus.SUCCESS:
            line += f" ({self.elapsed_ms:.3f}ms)"
        return line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "part": self.part.value,
            "solver_id": self.solver_id,
            "status": self.status.value,
            "answer": self.answer,
            "elapsed_ms": self.elapsed_ms,
            "summary": self.summary,
            "warnings": list(self.warnings),
            "payload": dict(self.payload),
        }
