"""Solver canônico: day07, No Space Left On Device.

Gramática (transcrição de terminal):
- `$ cd /`, `$ cd ..`, `$ cd <nome>`
- `$ ls`
- `dir <nome>` e `<tamanho> <nome>` (saída do ls)

O parse reconstrói a árvore de diretórios a partir de `/`; o tamanho de um
diretório é a soma recursiva dos arquivos que contém.

Config esperada (exemplo):
days:
  day07:
    max_dir_size: 100000
    disk_space: 70000000
    required_free: 30000000
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from aoc2022.core.exceptions import NoSolutionFound, SimulationError
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import numbered_lines, parse_error


MAX_DIR_SIZE = 100_000
DISK_SPACE = 70_000_000
REQUIRED_FREE = 30_000_000

_CD = re.compile(r"\$ cd (\S+)")
_LS = re.compile(r"\$ ls")
_DIR = re.compile(r"dir (\S+)")
_FILE = re.compile(r"([0-9]+) (\S+)")


@dataclass
class Directory:
    name: str
    parent: Optional["Directory"] = field(default=None, repr=False, compare=False)
    dirs: Dict[str, "Directory"] = field(default_factory=dict)
    files: Dict[str, int] = field(default_factory=dict)

    @property
    def path(self) -> str:
        if self.parent is None:
            return "/"
        parent = self.parent.path
        return f"{parent}{self.name}" if parent == "/" else f"{parent}/{self.name}"

    def child(self, name: str) -> "Directory":
        if name not in self.dirs:
            self.dirs[name] = Directory(name=name, parent=self)
        return self.dirs[name]


def dir_sizes(root: Directory) -> Dict[str, int]:
    """Tamanho recursivo de todos os diretórios, indexado pelo caminho."""
    sizes: Dict[str, int] = {}

    def walk(d: Directory) -> int:
        total = sum(d.files.values()) + sum(walk(sub) for sub in d.dirs.values())
        sizes[d.path] = total
        return total

    walk(root)
    return sizes


@dataclass
class NoSpaceLeft(Solver):
    id: str = "day07"
    day: int = 7
    title: str = "No Space Left On Device"

    def parse(self, text: str) -> Directory:
        root = Directory(name="/")
        cwd = root
        for no, line in numbered_lines(text):
            m = _CD.fullmatch(line)
            if m:
                target = m.group(1)
                if target == "/":
                    cwd = root
                elif target == "..":
                    if cwd.parent is None:
                        raise SimulationError(
                            message=f"`cd ..` acima da raiz (linha {no})",
                            details={"line_no": no, "line": line},
                        )
                    cwd = cwd.parent
                else:
                    cwd = cwd.child(target)
                continue
            if _LS.fullmatch(line):
                continue
            m = _DIR.fullmatch(line)
            if m:
                cwd.child(m.group(1))
                continue
            m = _FILE.fullmatch(line)
            if m:
                # listagens repetidas não duplicam tamanhos
                cwd.files[m.group(2)] = int(m.group(1))
                continue
            raise parse_error("Linha de terminal desconhecida", line_no=no, line=line)
        return root

    def part_1(self, puzzle: Directory, params: Dict[str, Any]) -> int:
        limit = int(params.get("max_dir_size", MAX_DIR_SIZE))
        return sum(size for size in dir_sizes(puzzle).values() if size <= limit)

    def part_2(self, puzzle: Directory, params: Dict[str, Any]) -> int:
        disk = int(params.get("disk_space", DISK_SPACE))
        required = int(params.get("required_free", REQUIRED_FREE))

        sizes = dir_sizes(puzzle)
        used = sizes["/"]
        to_free = required - (disk - used)
        if to_free <= 0:
            raise NoSolutionFound(
                message="Já existe espaço livre suficiente; nada a apagar",
                details={"used": used, "disk_space": disk, "required_free": required},
            )
        candidates = [size for size in sizes.values() if size >= to_free]
        if not candidates:
            raise NoSolutionFound(
                message="Nenhum diretório libera espaço suficiente",
                details={"to_free": to_free, "used": used},
            )
        return min(candidates)
