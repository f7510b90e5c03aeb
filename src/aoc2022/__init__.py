# src/aoc2022/__init__.py
"""
aoc2022: solvers independentes do Advent of Code 2022.

Este pacote raiz define o namespace público do projeto: uma coleção de
solvers diários, cada um responsável por ler uma entrada textual fixa,
interpretá-la e produzir duas respostas escalares (parte 1 e parte 2).

Princípios centrais:
    - Cada dia é uma unidade autocontida (read → parse → compute → print)
    - Dias não compartilham estado nem se chamam mutuamente
    - A execução é determinística para a mesma entrada
    - Erros são tipados, serializáveis e reportados ao operador

Arquitetura em alto nível:
    - core.config       → carregamento, merge e hashing de configuração
    - core.pipeline     → protocolo de Solver, contexto de execução e registry
    - core.engine       → seleção de dias e execução das partes
    - core.traceability → manifest JSON da execução
    - days              → um módulo por dia do calendário
    - report            → listagem de resultados em Markdown
    - cli               → ponto de entrada de linha de comando

Limites explícitos:
    - Não é uma biblioteca reutilizável nem um serviço
    - Não persiste estado entre execuções
    - Não realiza I/O além da leitura do arquivo de entrada
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
