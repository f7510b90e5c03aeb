# src/aoc2022/core/config/hashing.py
"""
Hashing canônico de configuração e de entradas.

O hash da configuração efetiva identifica, no manifest, com quais parâmetros
(linha do dia 15, número de rodadas do dia 11, ...) as respostas foram
produzidas. O fingerprint de entrada identifica qual arquivo foi lido.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256
"""


import hashlib
import json
from typing import Any, Dict, Tuple


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Configurações estruturalmente equivalentes (mesmo conteúdo, ordem de
    chaves diferente) produzem o mesmo hash.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def fingerprint_text(text: str) -> Tuple[str, int]:
    """Retorna (sha256, bytes) do texto de entrada codificado em UTF-8."""
    raw = text.encode("utf-8")
    return hashlib.sha256(raw).hexdigest(), len(raw)
