"""
aoc2022: Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do aoc2022.

Objetivo:
- Permitir que solvers e Engine levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para AocErrorPayload
- Evitar ValueError/RuntimeError genéricos em falhas esperadas de entrada

Regras:
- Não contém lógica de puzzle.
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class AocException(Exception):
    """Base class para exceções internas do aoc2022.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Entrada
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InputNotFound(AocException):
    """Arquivo de entrada do dia não existe no data dir configurado."""


@dataclass(eq=False)
class InputParseError(AocException):
    """Linha ou bloco da entrada não respeita a gramática do dia."""


# ---------------------------------------------------------------------------
# Computação
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class SimulationError(AocException):
    """Passo de simulação inválido (índice fora do intervalo, pilha vazia, ...)."""


@dataclass(eq=False)
class NoSolutionFound(AocException):
    """A entrada é válida, mas não produz resposta para a parte pedida."""


# ---------------------------------------------------------------------------
# Engine / Configuração
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class EngineConfigurationError(AocException):
    """Configuração inválida ou inconsistente para execução."""
