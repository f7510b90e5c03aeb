# tests/core/pipeline/test_run_context_logging.py
"""
Testes dos logs estruturados e warnings do RunContext.

Invariantes:
    - Todo evento carrega `run_id`, `solver_id`, `level`, `message` e timestamp
    - Campos extras são preservados no evento
    - Com `echo`, cada evento também é escrito de forma legível no stream
"""

import io
from datetime import datetime

from aoc2022.core.pipeline.context import new_run_context


def test_structured_log_event(dummy_ctx):
    dummy_ctx.log(solver_id="day01", level="info", message="parse done", elves=3)

    assert len(dummy_ctx.events) == 1
    ev = dummy_ctx.events[0]
    assert ev["run_id"] == dummy_ctx.run_id
    assert ev["solver_id"] == "day01"
    assert ev["level"] == "info"
    assert ev["message"] == "parse done"
    assert ev["elves"] == 3
    assert datetime.fromisoformat(ev["timestamp"]).tzinfo is not None


def test_log_echo_stream(dummy_ctx):
    stream = io.StringIO()
    dummy_ctx.echo = stream
    dummy_ctx.log(solver_id="day07", level="error", message="input failed", error_type="INPUT_NOT_FOUND")
    assert stream.getvalue() == "[error] day07: input failed error_type=INPUT_NOT_FOUND\n"


def test_debug_context_echoes_to_stderr(capsys):
    ctx = new_run_context(config={}, run_id="r", debug=True)
    ctx.log(solver_id="day02", level="info", message="parse done")
    assert "[info] day02: parse done" in capsys.readouterr().err


def test_warning_collection(dummy_ctx):
    dummy_ctx.add_warning(solver_id="day05", message="stack 3 empty")
    dummy_ctx.add_warning(solver_id="day05", message="stack 4 empty")
    assert dummy_ctx.warnings["day05"] == ["stack 3 empty", "stack 4 empty"]


def test_new_run_context_copies_meta():
    meta = {"command": "run", "days": [1]}
    ctx = new_run_context(config={}, run_id="r", meta=meta)
    meta["command"] = "list"
    assert ctx.meta == {"command": "run", "days": [1]}
