# src/aoc2022/core/pipeline/context.py
"""
Contexto de execução de uma run do aoc2022.

O `RunContext` concentra o estado explícito de uma execução:
    - identidade e metadados da run
    - configuração resolvida
    - resolução e leitura dos arquivos de entrada
    - parâmetros por dia (com overrides de modo teste)
    - artifact store (puzzles parseados, fingerprints de entrada)
    - logs estruturados e warnings por solver

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Ausência de estado global compartilhado entre dias

Invariantes:
    - Logs sempre incluem `run_id` e `solver_id`
    - Warnings são agrupados por `solver_id`
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from aoc2022.core.exceptions import InputNotFound


DEFAULT_FILE_PATTERN = "day{day:02d}.txt"
DEFAULT_TEST_FILE_PATTERN = "day{day:02d}_test.txt"


@dataclass
class RunContext:
    """
    Contexto de execução compartilhado de uma run.

    Campos:
        - run_id / created_at: identidade da execução
        - config: configuração efetiva (defaults + local)
        - test: usa as entradas de exemplo (`dayNN_test.txt`) e os
          parâmetros `days.<id>.test`
        - data_dir: sobrescreve `input.data_dir` quando informado
        - echo: stream que recebe uma cópia legível de cada evento (--debug)
    """
    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    test: bool = False
    data_dir: Optional[Path] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    echo: Optional[TextIO] = None

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Entradas
    # -----------------------------
    def _input_cfg(self) -> Dict[str, Any]:
        return (self.config or {}).get("input", {}) or {}

    def resolved_data_dir(self) -> Path:
        if self.data_dir is not None:
            return Path(self.data_dir)
        return Path(self._input_cfg().get("data_dir", "data"))

    def input_path(self, day: int) -> Path:
        cfg = self._input_cfg()
        if self.test:
            pattern = cfg.get("test_file_pattern", DEFAULT_TEST_FILE_PATTERN)
        else:
            pattern = cfg.get("file_pattern", DEFAULT_FILE_PATTERN)
        return self.resolved_data_dir() / pattern.format(day=day)

    def read_input(self, day: int) -> str:
        path = self.input_path(day)
        if not path.is_file():
            raise InputNotFound(
                message=f"Failed to read {path} from {os.getcwd()}",
                details={"day": day, "path": str(path), "cwd": os.getcwd(), "test": self.test},
            )
        text = path.read_text(encoding="utf-8")
        return text.replace("\r\n", "\n")

    # -----------------------------
    # Parâmetros por dia
    # -----------------------------
    def day_config(self, solver_id: str) -> Dict[str, Any]:
        days_cfg = (self.config or {}).get("days", {}) or {}
        return days_cfg.get(solver_id, {}) or {}

    def day_params(self, solver_id: str) -> Dict[str, Any]:
        """Parâmetros do dia; em modo teste, `days.<id>.test` sobrepõe os demais."""
        cfg = self.day_config(solver_id)
        params = {k: v for k, v in cfg.items() if k not in ("enabled", "test")}
        if self.test:
            params.update(cfg.get("test", {}) or {})
        return params

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        if key not in self._artifacts:
            raise KeyError(key)
        return self._artifacts[key]

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, solver_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "solver_id": solver_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        if self.echo is not None:
            fields = " ".join(f"{k}={v}" for k, v in extra.items())
            print(f"[{level}] {solver_id}: {message} {fields}".rstrip(), file=self.echo)

    def add_warning(self, *, solver_id: str, message: str) -> None:
        if solver_id not in self.warnings:
            self.warnings[solver_id] = []
        self.warnings[solver_id].append(message)


def new_run_context(
    *,
    config: Dict[str, Any],
    run_id: str,
    test: bool = False,
    data_dir: Optional[Path] = None,
    debug: bool = False,
    meta: Optional[Dict[str, Any]] = None,
) -> RunContext:
    """Cria um RunContext com timestamp UTC e, em modo debug, eco em stderr."""
    return RunContext(
        run_id=run_id,
        created_at=datetime.now(timezone.utc),
        config=config,
        test=test,
        data_dir=data_dir,
        meta=dict(meta or {}),
        echo=sys.stderr if debug else None,
    )
