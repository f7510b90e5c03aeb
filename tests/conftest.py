# tests/conftest.py
"""
Fixtures compartilhados para testes do aoc2022.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas
- contexto de execução controlado (RunContext) sobre um data dir temporário
- Solvers dummy para testes estruturais do Engine
- acesso às entradas de exemplo versionadas em `data/`

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Solvers dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa a run completa
    - Nenhuma fixture escreve fora de `tmp_path`
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao `defaults.yaml` empacotado.

    Usado por:
        - Testes do loader de config
        - Testes de deep-merge (defaults + local)
    """
    return """\
engine:
  fail_fast: true
  show_timing: true
input:
  data_dir: data
days:
  day07:
    enabled: true
    max_dir_size: 100000
  day15:
    row: 2000000
    test:
      row: 10
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local (apenas as chaves que mudam)."""
    return """\
engine:
  fail_fast: false
days:
  day07:
    enabled: false
"""


# =====================================================
# Pipeline fixtures (Solver + RunContext)
# =====================================================

@pytest.fixture
def dummy_config(tmp_path: Path) -> dict:
    """
    Configuração mínima já resolvida, apontando para um data dir temporário.

    Invariantes:
        - `fail_fast` explicitamente habilitado
        - Não depende de defaults externos
    """
    return {
        "engine": {"fail_fast": True, "show_timing": False},
        "input": {"data_dir": str(tmp_path / "data")},
        "days": {},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    `run_id` e `created_at` são fixos; o data dir existe e começa vazio.
    """
    from aoc2022.core.pipeline.context import RunContext

    Path(dummy_config["input"]["data_dir"]).mkdir(parents=True, exist_ok=True)
    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2022, 12, 1, 5, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def write_input(dummy_ctx):
    """Escreve `dayNN.txt` (ou `dayNN_test.txt` em modo teste) no data dir do contexto."""

    def _write(day: int, text: str) -> Path:
        path = dummy_ctx.input_path(day)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def DummySolver():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de um Solver.

    O solver dummy:
    - parseia a entrada como uma lista de inteiros (uma por linha)
    - part_1 devolve a soma, part_2 o produto
    - pode ser configurado para falhar em uma das partes

    Returns:
        type: Classe _DummySolver que pode ser instanciada pelos testes.
    """

    class _DummySolver:
        title = "Dummy"

        def __init__(self, day: int = 1, solver_id=None, fail_part=None, error=None):
            self.day = day
            self.id = solver_id or f"day{day:02d}"
            self.fail_part = fail_part
            self.error = error or RuntimeError("boom")
            self.parse_calls = 0

        def parse(self, text):
            self.parse_calls += 1
            return [int(line) for line in text.split()]

        def _maybe_fail(self, part):
            if self.fail_part == part:
                raise self.error

        def part_1(self, puzzle, params):
            self._maybe_fail(1)
            return sum(puzzle)

        def part_2(self, puzzle, params):
            self._maybe_fail(2)
            out = 1
            for v in puzzle:
                out *= v
            return out

    return _DummySolver


# =====================================================
# Example inputs
# =====================================================

@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture(scope="session")
def example_text():
    """Lê a entrada de exemplo versionada de um dia (`data/dayNN_test.txt`)."""

    def _read(day: int) -> str:
        return (DATA_DIR / f"day{day:02d}_test.txt").read_text(encoding="utf-8")

    return _read
