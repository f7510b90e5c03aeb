# src/aoc2022/core/traceability/__init__.py
"""
Pacote de rastreabilidade do aoc2022 (Manifest v1).

API pública exposta:
    - build_manifest → consolida contexto e resultado de uma run
    - save_manifest  → persistência do Manifest em JSON
    - load_manifest  → restauração do Manifest
"""

from .manifest import MANIFEST_VERSION, build_manifest, load_manifest, save_manifest

__all__ = [
    "MANIFEST_VERSION",
    "build_manifest",
    "load_manifest",
    "save_manifest",
]
