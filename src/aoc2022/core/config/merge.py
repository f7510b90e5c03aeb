# src/aoc2022/core/config/merge.py
"""
Deep-merge de configuração (defaults + override local).

Regras por valor do override:
    - dict sobre dict: merge recursivo
    - list: substitui a lista inteira
    - chave nova, ou base `None`: entra como está
    - número sobre número: aceito (`10` e `10.0` são o mesmo parâmetro
      para quem edita o YAML local); `bool` não conta como número
    - demais escalares: precisam ter o mesmo tipo da base

Um conflito interrompe o merge inteiro e aponta o caminho da chave
(ex.: `days.day15.row`).
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _compatible(base_value: Any, override_value: Any) -> bool:
    if base_value is None or isinstance(override_value, list):
        return True
    if _is_number(base_value) and _is_number(override_value):
        return True
    return type(base_value) is type(override_value)


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: Tuple[str, ...]) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        here = path + (str(key),)
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge(current, value, here)
        elif key not in merged or _compatible(current, value):
            merged[key] = deepcopy(value)
        else:
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{'.'.join(here)}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` sem mutar nenhum dos dois.

    Returns:
        Dict[str, Any]: Novo dicionário com a configuração resultante.

    Raises:
        ConfigTypeConflictError: Se algum valor do override tiver tipo
            incompatível com o da base (ou se as raízes não forem dicts).
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts na raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge(base, override, ())
