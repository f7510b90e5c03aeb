"""
src/aoc2022/report/results_md.py

Gerador canônico da listagem de resultados (results.md) do aoc2022.

Regras:
- A listagem é derivada EXCLUSIVAMENTE do Manifest (dict).
- Não recalcula respostas nem acessa entradas.
- Mesmo Manifest => mesmo results.md (ordenação estável por dia e parte).

Formato:
# Results

```
Day 1.1: 72602
Day 1.2: 207410
...
```
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple


def _require_manifest(manifest: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(manifest, dict) or not manifest:
        raise ValueError("Manifest is required to generate results.md")
    return manifest


def _sort_key(result: Dict[str, Any]) -> Tuple[int, str]:
    return int(result.get("day", 0)), str(result.get("part", ""))


def _render_value(result: Dict[str, Any]) -> str:
    status = result.get("status")
    if status == "success":
        text = str(result.get("answer"))
        return "\n" + text if "\n" in text else text
    if status == "skipped":
        return "skipped"
    error = (result.get("payload") or {}).get("error") or {}
    return f"FAILED ({error.get('type', 'UNKNOWN')})"


def generate_results_md(manifest: Dict[str, Any]) -> str:
    """Gera o conteúdo do results.md a partir do Manifest de uma run."""
    manifest = _require_manifest(manifest)

    run = manifest.get("run") if isinstance(manifest.get("run"), dict) else {}
    results = manifest.get("results") if isinstance(manifest.get("results"), dict) else {}

    lines: List[str] = ["# Results", ""]
    if run.get("test_mode"):
        lines.append("_Example inputs (test mode)._")
        lines.append("")

    lines.append("```")
    rows = [r for r in results.values() if isinstance(r, dict)]
    for r in sorted(rows, key=_sort_key):
        value = _render_value(r)
        sep = "" if value.startswith("\n") else " "
        lines.append(f"Day {r.get('day')}.{r.get('part')}:{sep}{value}")
    lines.append("```")

    failed = [r for r in rows if r.get("status") == "failed"]
    if failed:
        lines.append("")
        lines.append("## Failures")
        for r in sorted(failed, key=_sort_key):
            error = (r.get("payload") or {}).get("error") or {}
            lines.append(f"- **Day {r.get('day')}.{r.get('part')}**: {error.get('message', r.get('summary', ''))}")
            if error.get("hint"):
                lines.append(f"  - hint: {error['hint']}")

    lines.append("")
    return "\n".join(lines)
