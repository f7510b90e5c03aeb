# src/aoc2022/core/config/errors.py
"""
Exceções canônicas da camada de configuração do aoc2022.

As exceções aqui definidas representam violações estruturais da
configuração (arquivo ausente, formato desconhecido, tipos conflitantes)
e não erros de puzzle.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de parse de entrada de um dia
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do aoc2022.

    Permite à CLI capturar qualquer falha de configuração de forma genérica
    e encerrar com código de uso (2), distinto de falhas de execução.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"days": {"day15": {"row": 2000000}}}
        - override: {"days": {"day15": "10"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
