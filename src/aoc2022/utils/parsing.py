# src/aoc2022/utils/parsing.py
"""
Helpers de parsing de texto compartilhados pelos dias.

Todos os erros de gramática são levantados como `InputParseError`, com o
número da linha (1-based) e o conteúdo ofensivo em `details`.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator, List, Optional, Pattern, Sequence, Tuple, TypeVar

from aoc2022.core.exceptions import InputParseError


T = TypeVar("T")

_BLANK_LINES = re.compile(r"\n[ \t]*\n")
_MISSING = object()
_INT = re.compile(r"-?[0-9]+")


def lines(text: str) -> List[str]:
    """Linhas não vazias, sem espaços nas extremidades."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def numbered_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Como `lines`, mas preserva o número (1-based) da linha original."""
    for no, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            yield no, line.strip()


def blocks(text: str) -> List[List[str]]:
    """
    Separa o texto em blocos delimitados por uma ou mais linhas em branco.

    Linhas em branco no início e no fim são ignoradas; entrada vazia produz
    uma lista vazia.
    """
    out: List[List[str]] = []
    for chunk in _BLANK_LINES.split(text.strip("\n")):
        rows = lines(chunk)
        if rows:
            out.append(rows)
    return out


def parse_error(message: str, *, line_no: Optional[int] = None, line: Optional[str] = None, **details: Any) -> InputParseError:
    info = dict(details)
    if line_no is not None:
        info["line_no"] = line_no
    if line is not None:
        info["line"] = line
    where = f" (linha {line_no}: {line!r})" if line_no is not None else ""
    return InputParseError(message=f"{message}{where}", details=info)


def parse_int(token: str, *, line_no: Optional[int] = None, line: Optional[str] = None) -> int:
    """Inteiro decimal ASCII com sinal opcional `-`; `1_000`, `+5` e dígitos não ASCII são rejeitados."""
    if _INT.fullmatch(token) is None:
        raise parse_error(f"Inteiro inválido {token!r}", line_no=line_no, line=line)
    return int(token)


def match_line(pattern: Pattern[str], line: str, *, line_no: Optional[int] = None, expected: str = "") -> "re.Match[str]":
    """`fullmatch` obrigatório; falha vira InputParseError com a forma esperada."""
    m = pattern.fullmatch(line)
    if m is None:
        hint = f" (esperado: {expected})" if expected else ""
        raise parse_error(f"Linha fora da gramática{hint}", line_no=line_no, line=line)
    return m


def single(items: Iterable[T]) -> Optional[T]:
    """Retorna o único elemento do iterável, ou None se houver zero ou mais de um."""
    it = iter(items)
    first = next(it, _MISSING)
    if first is _MISSING or next(it, _MISSING) is not _MISSING:
        return None
    return first


def common_items(groups: Sequence[Iterable[T]]) -> List[T]:
    """Itens presentes em todos os grupos, na ordem da primeira ocorrência no primeiro."""
    if not groups:
        return []
    rest = [set(g) for g in groups[1:]]
    out: List[T] = []
    for item in groups[0]:
        if item not in out and all(item in g for g in rest):
            out.append(item)
    return out
