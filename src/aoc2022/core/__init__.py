# src/aoc2022/core/__init__.py
"""
Core do aoc2022.

Este pacote reúne a infraestrutura comum a todos os dias, sem conter
nenhuma regra de puzzle:

    - config       → resolução de configuração (merge, validação estrutural, hashing)
    - pipeline     → protocolo de Solver, tipos de resultado, RunContext e registry
    - engine       → planejamento (seleção de dias) e execução controlada das partes
    - traceability → manifest da execução para auditoria posterior
    - errors       → payload canônico de erro e catálogo de tipos estáveis
    - exceptions   → exceções tipadas levantadas por solvers e engine

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda falha vira um resultado FAILED explícito
    - Solvers não conhecem o Engine
    - Estado compartilhado é mediado exclusivamente pelo RunContext

Limites explícitos:
    - Não contém lógica de dia específica
    - Não depende da CLI
"""
