# tests/report/test_results_md.py
"""
Testes do gerador de results.md.

Regras:
- derivado exclusivamente do Manifest
- ordenação estável por dia e parte
- falhas listadas com mensagem e hint
"""

import pytest

from aoc2022.report.results_md import generate_results_md


def _manifest():
    return {
        "run": {"run_id": "r", "test_mode": False},
        "results": {
            "5.1": {"day": 5, "part": "1", "status": "success", "answer": "VQZNJMWTR"},
            "1.2": {"day": 1, "part": "2", "status": "success", "answer": 207410},
            "1.1": {"day": 1, "part": "1", "status": "success", "answer": 72602},
            "10.2": {"day": 10, "part": "2", "status": "success", "answer": "#.\n.#"},
            "7.1": {
                "day": 7,
                "part": "1",
                "status": "failed",
                "summary": "missing",
                "payload": {"error": {"type": "INPUT_NOT_FOUND", "message": "no file", "hint": "add it"}},
            },
            "8.1": {"day": 8, "part": "1", "status": "skipped"},
        },
    }


def test_results_listing_is_sorted():
    md = generate_results_md(_manifest())
    body = md.split("```")[1].strip().splitlines()
    assert body == [
        "Day 1.1: 72602",
        "Day 1.2: 207410",
        "Day 5.1: VQZNJMWTR",
        "Day 7.1: FAILED (INPUT_NOT_FOUND)",
        "Day 8.1: skipped",
        "Day 10.2:",
        "#.",
        ".#",
    ]


def test_failures_section():
    md = generate_results_md(_manifest())
    assert "## Failures" in md
    assert "- **Day 7.1**: no file" in md
    assert "  - hint: add it" in md


def test_deterministic():
    assert generate_results_md(_manifest()) == generate_results_md(_manifest())


def test_requires_manifest():
    with pytest.raises(ValueError):
        generate_results_md({})
