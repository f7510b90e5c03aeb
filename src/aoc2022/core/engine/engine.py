# src/aoc2022/core/engine/engine.py
"""
Engine de execução dos solvers diários.

Para cada dia planejado o Engine:
    1. verifica `days.<id>.enabled` (dias desabilitados viram SKIPPED)
    2. lê a entrada via RunContext e registra seu fingerprint
    3. executa `solver.parse` uma única vez
    4. executa cada parte selecionada, medindo o tempo de computação
    5. consolida um `PartResult` imutável por parte

Guardrails:
- Exceções são convertidas em AocErrorPayload (serializável e acionável) e
  persistidas em `PartResult.payload["error"]`; nenhuma stack trace chega
  ao operador.
- Falha de leitura ou parse marca todas as partes selecionadas do dia como
  FAILED.
- Entrada vazia gera um warning do dia, anexado a cada PartResult.
- Com `engine.fail_fast` (default), a run é interrompida no primeiro dia
  com falha.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, Iterable, List, Optional, Sequence

from aoc2022.core.config.hashing import fingerprint_text
from aoc2022.core.errors import (
    AocErrorPayload,
    DEFAULT_HINTS,
    EXCEPTION_TYPE_CODES,
    engine_execution_error,
)
from aoc2022.core.exceptions import AocException, EngineConfigurationError
from aoc2022.core.pipeline.context import RunContext
from aoc2022.core.pipeline.step import Solver
from aoc2022.core.pipeline.types import Answer, DayPart, PartResult, PartStatus

from .planner import plan_execution


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução, indexado por label (`"N.P"`)."""

    parts: Dict[str, PartResult] = field(default_factory=dict)

    @property
    def failed(self) -> List[PartResult]:
        return [r for r in self.parts.values() if r.status is PartStatus.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failed

    def answers(self) -> Dict[str, Answer | None]:
        return {label: r.answer for label, r in self.parts.items()}


class Engine:
    """Engine canônico do aoc2022 (planner + executor)."""

    def __init__(
        self,
        *,
        solvers: Sequence[Solver],
        ctx: RunContext,
        days: Optional[Iterable[int]] = None,
        part: DayPart = DayPart.BOTH,
    ):
        self.solvers: List[Solver] = list(solvers)
        self.ctx: RunContext = ctx
        self.days: List[int] = list(days or [])
        self.part: DayPart = part

    def _is_enabled(self, solver_id: str) -> bool:
        return bool(self.ctx.day_config(solver_id).get("enabled", True))

    def _fail_fast(self) -> bool:
        engine_cfg = (self.ctx.config or {}).get("engine", {}) or {}
        return bool(engine_cfg.get("fail_fast", True))

    # ------------------------------------------------------------------
    # Guardrails: exceção -> AocErrorPayload
    # ------------------------------------------------------------------

    def _exception_to_error(self, exc: Exception, *, solver_id: str) -> AocErrorPayload:
        """Converte exceções em AocErrorPayload.

        Regras:
        - AocException: código estável pelo nome da classe (ou de uma base
          conhecida), hint próprio ou o hint padrão do código.
        - Outras exceções: ENGINE_EXECUTION_ERROR sem expor stack trace.
        """
        if isinstance(exc, AocException):
            code = next(
                (
                    EXCEPTION_TYPE_CODES[cls.__name__]
                    for cls in type(exc).__mro__
                    if cls.__name__ in EXCEPTION_TYPE_CODES
                ),
                type(exc).__name__,
            )
            return AocErrorPayload(
                type=code,
                message=str(exc) or "Erro de execução",
                details=dict(exc.details or {}),
                hint=exc.hint or DEFAULT_HINTS.get(code),
            )

        return engine_execution_error(
            solver_id=solver_id,
            exc_type=type(exc).__name__,
            exc_message=str(exc) or None,
        )

    def _normalize_answer(self, value: Any, *, solver_id: str, part: DayPart) -> Answer:
        """Aceita int/str (e inteiros numpy); qualquer outro tipo é erro de configuração do solver."""
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return int(value)
        if isinstance(value, str):
            return value
        raise EngineConfigurationError(
            message="Solver retornou tipo inválido",
            details={
                "solver_id": solver_id,
                "part": part.value,
                "expected": "int | str",
                "received": type(value).__name__,
            },
            hint="Ajuste o solver para retornar int ou str",
        )

    def _mk_failed(self, solver: Solver, part: DayPart, error: AocErrorPayload) -> PartResult:
        return PartResult(
            day=solver.day,
            part=part,
            solver_id=solver.id,
            status=PartStatus.FAILED,
            summary=error.message,
            warnings=list(self.ctx.warnings.get(solver.id, [])),
            payload={"error": error.to_dict()},
        )

    def _run_part(self, solver: Solver, part: DayPart, puzzle: Any, params: Dict[str, Any]) -> PartResult:
        sid = solver.id
        fn = solver.part_1 if part is DayPart.ONE else solver.part_2

        start = perf_counter()
        try:
            raw = fn(puzzle, params)
            elapsed_ms = (perf_counter() - start) * 1000.0
            answer = self._normalize_answer(raw, solver_id=sid, part=part)
        except Exception as e:
            error = self._exception_to_error(e, solver_id=sid)
            self.ctx.log(solver_id=sid, level="error", message="part failed", part=part.value, error_type=error.type)
            return self._mk_failed(solver, part, error)

        self.ctx.log(solver_id=sid, level="info", message="part solved", part=part.value, elapsed_ms=round(elapsed_ms, 3))
        return PartResult(
            day=solver.day,
            part=part,
            solver_id=sid,
            status=PartStatus.SUCCESS,
            answer=answer,
            elapsed_ms=elapsed_ms,
            summary="solved",
            warnings=list(self.ctx.warnings.get(sid, [])),
        )

    def run(self) -> RunResult:
        ordered = plan_execution(self.solvers, self.days)
        parts = self.part.expand()

        results: Dict[str, PartResult] = {}
        for solver in ordered:
            sid = solver.id

            if not self._is_enabled(sid):
                self.ctx.log(solver_id=sid, level="info", message="skipped by config")
                for p in parts:
                    r = PartResult(
                        day=solver.day,
                        part=p,
                        solver_id=sid,
                        status=PartStatus.SKIPPED,
                        summary="skipped by config",
                    )
                    results[r.label] = r
                continue

            try:
                text = self.ctx.read_input(solver.day)
                sha256, size = fingerprint_text(text)
                self.ctx.set_artifact(
                    f"input:{sid}",
                    {"path": str(self.ctx.input_path(solver.day)), "sha256": sha256, "bytes": size},
                )
                self.ctx.log(solver_id=sid, level="info", message="input loaded", bytes=size)
                if not text.strip():
                    self.ctx.add_warning(solver_id=sid, message=f"input file is empty: {self.ctx.input_path(solver.day)}")
                    self.ctx.log(solver_id=sid, level="warning", message="empty input")

                puzzle = solver.parse(text)
                self.ctx.log(solver_id=sid, level="info", message="parse done")
            except Exception as e:
                error = self._exception_to_error(e, solver_id=sid)
                self.ctx.log(solver_id=sid, level="error", message="input failed", error_type=error.type)
                for p in parts:
                    r = self._mk_failed(solver, p, error)
                    results[r.label] = r
                if self._fail_fast():
                    break
                continue

            params = self.ctx.day_params(sid)
            day_failed = False
            for p in parts:
                r = self._run_part(solver, p, puzzle, params)
                results[r.label] = r
                if r.status is PartStatus.FAILED:
                    day_failed = True
                    if self._fail_fast():
                        break

            if day_failed and self._fail_fast():
                break

        return RunResult(parts=results)
