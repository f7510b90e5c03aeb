# src/aoc2022/core/traceability/manifest.py
"""
Manifest v1: rastreabilidade de execuções do aoc2022.

O Manifest consolida, de forma determinística e auditável:
    - metadados da execução (run)
    - hash da configuração efetiva e fingerprints das entradas lidas
    - resultado de cada parte executada
    - Event Log ordenado produzido via `RunContext.log`

Invariantes:
    - `results` é indexado por label (`"N.P"`) na ordem de execução
    - `events` preserva a ordem de registro
    - A estrutura completa é serializável em JSON
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from aoc2022 import __version__
from aoc2022.core.config.hashing import compute_config_hash
from aoc2022.core.engine.engine import RunResult
from aoc2022.core.pipeline.context import RunContext


MANIFEST_VERSION = 1


def _iso(dt: datetime) -> str:
    """Normaliza para UTC timezone-aware e serializa em ISO 8601."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


def build_manifest(ctx: RunContext, run_result: RunResult) -> Dict[str, Any]:
    """
    Constrói o Manifest de uma execução já concluída.

    Fingerprints de entrada são lidos dos artefatos `input:<solver_id>`
    registrados pelo Engine; dias que falharam antes da leitura não
    aparecem em `inputs.files`.

    Returns:
        Dict[str, Any]: Manifest serializável.
    """
    files: Dict[str, Any] = {}
    for r in run_result.parts.values():
        key = f"input:{r.solver_id}"
        if r.solver_id not in files and ctx.has_artifact(key):
            files[r.solver_id] = dict(ctx.get_artifact(key))

    return {
        "manifest_version": MANIFEST_VERSION,
        "run": {
            "run_id": ctx.run_id,
            "started_at": _iso(ctx.created_at),
            "aoc2022_version": __version__,
            "test_mode": ctx.test,
            "data_dir": str(ctx.resolved_data_dir()),
            "meta": dict(ctx.meta),
        },
        "inputs": {
            "config_hash": compute_config_hash(ctx.config),
            "files": files,
        },
        "results": {label: r.to_dict() for label, r in run_result.parts.items()},
        "summary": {
            "parts": len(run_result.parts),
            "failed": len(run_result.failed),
        },
        "events": [dict(e) for e in ctx.events],
    }


def save_manifest(manifest: Dict[str, Any], path: Path) -> None:
    """
    Persiste um Manifest em disco no formato JSON.

    Chaves ordenadas e indentação estável; diretórios intermediários são
    criados automaticamente.

    Raises:
        OSError: Em caso de falha ao criar diretórios ou escrever o arquivo.
        TypeError: Se o conteúdo do Manifest não for serializável em JSON.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(manifest, ensure_ascii=False, indent=2, sort_keys=True), encoding="utf-8")


def load_manifest(path: Path) -> Dict[str, Any]:
    """Carrega um Manifest persistido por `save_manifest`."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Manifest root deve ser dict: {path}")
    return data
