# tests/core/pipeline/test_run_context_inputs.py
"""
Testes da resolução de entradas e parâmetros por dia no RunContext.

Invariantes:
    - `dayNN.txt` em modo normal, `dayNN_test.txt` em modo teste
    - `data_dir` explícito tem prioridade sobre `input.data_dir`
    - arquivo ausente => InputNotFound com caminho e cwd em `details`
    - `\\r\\n` é normalizado para `\\n`
    - `days.<id>.test` só se aplica em modo teste
"""

from pathlib import Path

import pytest

from aoc2022.core.exceptions import InputNotFound


def test_input_path_patterns(dummy_ctx):
    data = Path(dummy_ctx.config["input"]["data_dir"])
    assert dummy_ctx.input_path(7) == data / "day07.txt"
    dummy_ctx.test = True
    assert dummy_ctx.input_path(7) == data / "day07_test.txt"


def test_explicit_data_dir_wins(dummy_ctx, tmp_path):
    dummy_ctx.data_dir = tmp_path / "elsewhere"
    assert dummy_ctx.input_path(12) == tmp_path / "elsewhere" / "day12.txt"


def test_custom_file_pattern(dummy_ctx):
    dummy_ctx.config["input"]["file_pattern"] = "input-{day}.txt"
    assert dummy_ctx.input_path(3).name == "input-3.txt"


def test_read_input_normalizes_newlines(dummy_ctx, write_input):
    path = write_input(1, "1\r\n2\r\n")
    path.write_bytes(b"1\r\n2\r\n")
    assert dummy_ctx.read_input(1) == "1\n2\n"


def test_missing_input_raises(dummy_ctx):
    with pytest.raises(InputNotFound) as info:
        dummy_ctx.read_input(9)
    assert info.value.details["day"] == 9
    assert info.value.details["path"].endswith("day09.txt")
    assert "cwd" in info.value.details


def test_day_params_with_test_overrides(dummy_ctx):
    dummy_ctx.config["days"]["day15"] = {
        "enabled": True,
        "row": 2000000,
        "search_max": 4000000,
        "test": {"row": 10, "search_max": 20},
    }
    assert dummy_ctx.day_params("day15") == {"row": 2000000, "search_max": 4000000}
    dummy_ctx.test = True
    assert dummy_ctx.day_params("day15") == {"row": 10, "search_max": 20}
    assert dummy_ctx.day_params("day99") == {}
