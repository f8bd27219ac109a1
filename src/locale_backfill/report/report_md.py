"""
src/locale_backfill/report/report_md.py

Gerador canônico do relatório Markdown de uma run de backfill.

Regras:
- O relatório é derivado EXCLUSIVAMENTE do resumo da run (dict).
- Não recalcula merges nem acessa o filesystem.
- Mesmo resumo => mesmo Markdown (ordenação estável por locale).

Estrutura mínima obrigatória:
# Backfill Report

## Summary
## Locales
## Structural Conflicts
## Untranslated Sections
## Run Metadata
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple


REQUIRED_SECTIONS: List[str] = [
    "# Backfill Report",
    "## Summary",
    "## Locales",
    "## Structural Conflicts",
    "## Untranslated Sections",
    "## Run Metadata",
]

# Seções mostradas por locale na tabela de pendências
TOP_SECTIONS = 10


def _sorted_items(d: Any) -> List[Tuple[str, Any]]:
    if not isinstance(d, dict):
        return []
    return sorted(d.items(), key=lambda kv: kv[0])


def _as_pretty_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True, indent=2)


def _require_summary(summary: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(summary, dict) or not summary:
        raise ValueError("Run summary is required to generate the backfill report")
    return summary


def _written_label(value: Any) -> str:
    if value is True:
        return "written"
    if value is False:
        return "unchanged"
    return "not persisted"


def generate_report_md(summary: Dict[str, Any]) -> str:
    """Gera o conteúdo completo do relatório a partir do resumo da run."""
    summary = _require_summary(summary)

    run = summary.get("run") if isinstance(summary.get("run"), dict) else {}
    locales = summary.get("locales") if isinstance(summary.get("locales"), dict) else {}
    reference = summary.get("reference", "<unknown>")

    lines: List[str] = []

    lines.append("# Backfill Report\n")

    # Summary
    lines.append("## Summary")
    totals = {"filled": 0, "changed": 0, "unchanged": 0, "conflicts": 0}
    for _locale, entry in _sorted_items(locales):
        merge = entry.get("merge") if isinstance(entry, dict) else None
        if isinstance(merge, dict):
            for k in totals:
                totals[k] += int(merge.get(k, 0) or 0)
    lines.append(f"- **Run ID**: `{run.get('run_id', '<unknown>')}`")
    lines.append(f"- **Reference locale**: `{reference}`")
    lines.append(f"- **Dry run**: `{bool(run.get('dry_run', False))}`")
    lines.append(f"- **Keys filled**: `{totals['filled']}` (changed: `{totals['changed']}`)")
    lines.append(f"- **Keys left unchanged**: `{totals['unchanged']}`")
    lines.append(f"- **Structural conflicts**: `{totals['conflicts']}`\n")

    # Locales
    lines.append("## Locales")
    if locales:
        lines.append("| locale | filled | changed | unchanged | conflicts | untranslated before | file |")
        lines.append("|---|---|---|---|---|---|---|")
        for locale, entry in _sorted_items(locales):
            if not isinstance(entry, dict):
                continue
            merge = entry.get("merge") or {}
            lines.append(
                f"| `{locale}` | {merge.get('filled', 0)} | {merge.get('changed', 0)} | "
                f"{merge.get('unchanged', 0)} | {merge.get('conflicts', 0)} | "
                f"{entry.get('untranslated_before', '-')} | {_written_label(entry.get('written'))} |"
            )
    else:
        lines.append("No target locales were processed.")
    lines.append("")

    # Structural Conflicts
    lines.append("## Structural Conflicts")
    any_conflict = False
    for locale, entry in _sorted_items(locales):
        merge = entry.get("merge") if isinstance(entry, dict) else None
        paths = (merge or {}).get("conflict_paths") or []
        for path in paths:
            any_conflict = True
            lines.append(f"- `{locale}`: `{path}` (reset to reference shape)")
    if not any_conflict:
        lines.append("No structural conflicts.")
    lines.append("")

    # Untranslated Sections
    lines.append("## Untranslated Sections")
    any_section = False
    for locale, entry in _sorted_items(locales):
        sections = entry.get("sections") if isinstance(entry, dict) else None
        if not isinstance(sections, dict) or not sections:
            continue
        any_section = True
        lines.append(f"### {locale}")
        for name, count in list(sections.items())[:TOP_SECTIONS]:
            lines.append(f"- **{name}**: {count}")
    if not any_section:
        lines.append("No untranslated sections recorded (audit disabled or locales complete).")
    lines.append("")

    # Run Metadata
    lines.append("## Run Metadata")
    lines.append("```json")
    lines.append(_as_pretty_json(run))
    lines.append("```")

    content = "\n".join(lines) + "\n"

    for sec in REQUIRED_SECTIONS:
        if sec not in content:
            raise RuntimeError(f"Report generation failed: missing required section: {sec}")

    return content
