"""
Solvers diários do Advent of Code 2022.

Cada módulo `dayNN` expõe um único Solver; `build_registry` registra todos
em ordem de dia. Solvers não se chamam entre si nem compartilham estado.
"""

from __future__ import annotations

from typing import List

from aoc2022.core.pipeline.registry import SolverRegistry
from aoc2022.core.pipeline.step import Solver

from .day01 import CalorieCounting
from .day02 import RockPaperScissors
from .day03 import RucksackReorganization
from .day04 import CampCleanup
from .day05 import SupplyStacks
from .day06 import TuningTrouble
from .day07 import NoSpaceLeft
from .day08 import TreetopTreeHouse
from .day09 import RopeBridge
from .day10 import CathodeRayTube
from .day11 import MonkeyInTheMiddle
from .day12 import HillClimbing
from .day13 import DistressSignal
from .day14 import RegolithReservoir
from .day15 import BeaconExclusionZone


def default_solvers() -> List[Solver]:
    return [
        CalorieCounting(),
        RockPaperScissors(),
        RucksackReorganization(),
        CampCleanup(),
        SupplyStacks(),
        TuningTrouble(),
        NoSpaceLeft(),
        TreetopTreeHouse(),
        RopeBridge(),
        CathodeRayTube(),
        MonkeyInTheMiddle(),
        HillClimbing(),
        DistressSignal(),
        RegolithReservoir(),
        BeaconExclusionZone(),
    ]


def build_registry() -> SolverRegistry:
    registry = SolverRegistry()
    for solver in default_solvers():
        registry.add(solver)
    return registry


__all__ = ["default_solvers", "build_registry"]
