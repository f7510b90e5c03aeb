# src/aoc2022/core/config/loader.py
"""
Loader canônico de configuração do aoc2022.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório, empacotado com o projeto)
    - um arquivo local de overrides (opcional)

Política de resolução:
    - O local sempre tem prioridade sobre os defaults
    - A resolução utiliza `deep_merge` com política determinística
    - Um local ausente é ignorado; um defaults ausente é erro fatal

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não valida parâmetros de puzzle (responsabilidade de cada dia)
    - Não persiste configuração nem hash
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


# defaults empacotados junto ao pacote (package-data)
DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")

_READERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo YAML ou JSON cuja raiz deve ser um dicionário.

    Arquivo vazio (ou só com espaços/comentários YAML) vale `{}`.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não tiver leitor.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix or '(sem extensão)'} "
            f"(aceitos: {', '.join(sorted(_READERS))})"
        )

    text = path.read_text(encoding="utf-8")
    data = reader(text) if text.strip() else None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Raiz de {path.name} deve ser dict, recebido: {type(data).__name__}"
        )
    return data


def load_config(
    *,
    defaults_path: Optional[Union[str, Path]] = None,
    local_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva da execução.

    Args:
        defaults_path: Caminho para a configuração base. Quando omitido,
            usa o `defaults.yaml` empacotado (`DEFAULTS_PATH`).
        local_path: Caminho opcional para overrides locais. Ignorado se o
            arquivo não existir.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    defaults_file = Path(defaults_path) if defaults_path is not None else DEFAULTS_PATH
    effective = _load_file(defaults_file)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(effective, local)

    return effective
