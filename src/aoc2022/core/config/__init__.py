# src/aoc2022/core/config/__init__.py

"""
Camada de configuração do aoc2022.

A configuração controla políticas de execução (fail-fast, timing), a
localização das entradas e os parâmetros de cada dia (linha alvo do dia 15,
rodadas do dia 11, limiares do dia 7, ...).

A configuração é:
    - declarativa
    - determinística
    - separada da lógica dos puzzles

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, fingerprint_text
from .loader import DEFAULTS_PATH, load_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "fingerprint_text",
    "DEFAULTS_PATH",
    "load_config",
    "deep_merge",
]
