# tests/core/config/test_hashing.py
"""
Testes do hashing canônico de configuração e do fingerprint de entradas.
"""

import hashlib
import json

import pytest

from aoc2022.core.config.hashing import compute_config_hash, fingerprint_text


def test_hash_is_deterministic():
    cfg1 = {"engine": {"fail_fast": True}, "days": {"day15": {"row": 10}}}
    cfg2 = {"days": {"day15": {"row": 10}}, "engine": {"fail_fast": True}}
    h1 = compute_config_hash(cfg1)
    h2 = compute_config_hash(cfg2)
    assert h1 == h2
    assert isinstance(h1, str)
    assert len(h1) == 64


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"b": 1, "a": {"y": 2, "x": 1}}
    canonical = json.dumps(cfg, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    assert compute_config_hash(cfg) == hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def test_hash_changes_on_override():
    base = {"days": {"day11": {"rounds_part2": 10000}}}
    changed = {"days": {"day11": {"rounds_part2": 1000}}}
    assert compute_config_hash(base) != compute_config_hash(changed)


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash([1, 2])  # type: ignore[arg-type]


def test_fingerprint_text():
    sha, size = fingerprint_text("ação\n")
    assert size == len("ação\n".encode("utf-8")) == 7
    assert sha == hashlib.sha256("ação\n".encode("utf-8")).hexdigest()
