"""
Ponto de entrada de linha de comando do aoc2022.

    aoc2022 run [DAY ...] [--part {1,2,*}] [--test] [--debug] ...
    aoc2022 list

Códigos de saída:
    0  todas as partes executadas com sucesso (ou puladas por config)
    1  ao menos uma parte falhou
    2  erro de uso ou de configuração (nada foi executado)
"""

from __future__ import annotations

import argparse
import sys
import uuid
from pathlib import Path
from typing import List, Optional

from aoc2022 import __version__
from aoc2022.core.config import ConfigError, load_config
from aoc2022.core.engine import Engine, UnknownDayError
from aoc2022.core.pipeline import DayPart, DuplicateSolverIdError, new_run_context
from aoc2022.core.traceability import build_manifest, save_manifest
from aoc2022.days import build_registry
from aoc2022.report import generate_results_md


LOCAL_CONFIG = "config.local.yaml"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2022", description="Advent of Code 2022 solvers")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Run one or more days (all days when none is given)")
    p_run.add_argument("days", nargs="*", type=int, metavar="DAY", help="Day numbers to run")
    p_run.add_argument("--part", choices=[p.value for p in DayPart], default=DayPart.BOTH.value,
                       help="Part to run: 1, 2 or * for both (default: *)")
    p_run.add_argument("--test", action="store_true", help="Use example inputs (dayNN_test.txt)")
    p_run.add_argument("--debug", action="store_true", help="Echo execution events to stderr")
    p_run.add_argument("--config", default=None, help="Base config file (default: packaged defaults.yaml)")
    p_run.add_argument("--local-config", default=None,
                       help=f"Local override file (default: {LOCAL_CONFIG} when present)")
    p_run.add_argument("--data-dir", default=None, help="Directory holding the input files")
    p_run.add_argument("--report", default=None, help="Write a Markdown result listing to this path")
    p_run.add_argument("--manifest", default=None, help="Write the JSON run manifest to this path")

    sub.add_parser("list", help="List registered days")
    return parser


def _cmd_list() -> int:
    for solver in build_registry().list():
        print(f"{solver.day:2d}  {solver.id}  {solver.title}")
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    if args.local_config is not None and not Path(args.local_config).exists():
        print(f"error: local config not found: {args.local_config}", file=sys.stderr)
        return 2

    try:
        config = load_config(defaults_path=args.config, local_path=args.local_config or LOCAL_CONFIG)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    ctx = new_run_context(
        config=config,
        run_id=uuid.uuid4().hex,
        test=args.test,
        data_dir=Path(args.data_dir) if args.data_dir else None,
        debug=args.debug,
        meta={"command": "run", "days": list(args.days), "part": args.part},
    )
    engine = Engine(
        solvers=build_registry().list(),
        ctx=ctx,
        days=args.days,
        part=DayPart(args.part),
    )

    try:
        result = engine.run()
    except (UnknownDayError, DuplicateSolverIdError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    show_timing = bool((config.get("engine", {}) or {}).get("show_timing", True))
    for part_result in result.parts.values():
        print(part_result.format_line(show_timing=show_timing))
        error = part_result.error
        if error and error.get("hint"):
            print(f"  hint: {error['hint']}", file=sys.stderr)

    if args.manifest or args.report:
        manifest = build_manifest(ctx, result)
        if args.manifest:
            save_manifest(manifest, Path(args.manifest))
        if args.report:
            report = Path(args.report)
            report.parent.mkdir(parents=True, exist_ok=True)
            report.write_text(generate_results_md(manifest), encoding="utf-8")

    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.cmd == "list":
        return _cmd_list()
    return _cmd_run(args)
