"""
src/locale_backfill/steps/export/report_md.py

Step canônico: export.report_md

Gera o relatório Markdown da run a partir dos artefatos já publicados:
- relatórios de merge (`backfill.reports`)
- auditoria prévia (`audit.untranslated`, opcional)
- resultado da escrita (`export.written`, ausente em dry-run)

Sem `report.path` na config, o Step é SKIPPED.

Não faz:
- recalcular merges
- escrever locales
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from locale_backfill.core.merge.report import MergeReport
from locale_backfill.core.pipeline.context import (
    AUDIT_ARTIFACT_KEY,
    REFERENCE_ARTIFACT_KEY,
    REPORTS_ARTIFACT_KEY,
    RunContext,
)
from locale_backfill.core.pipeline.step import Step
from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus
from locale_backfill.report.report_md import generate_report_md
from locale_backfill.steps._common import base_dir, failed_result_payload

from .locales import WRITTEN_ARTIFACT_KEY


def _optional_artifact(ctx: RunContext, key: str) -> Dict[str, Any]:
    return ctx.get_artifact(key) if ctx.has_artifact(key) else {}


def build_run_summary(ctx: RunContext) -> Dict[str, Any]:
    """Resumo da run no formato consumido por `generate_report_md`."""
    reports: Dict[str, MergeReport] = ctx.get_artifact(REPORTS_ARTIFACT_KEY)
    audit = _optional_artifact(ctx, AUDIT_ARTIFACT_KEY)
    written = _optional_artifact(ctx, WRITTEN_ARTIFACT_KEY)
    reference = _optional_artifact(ctx, REFERENCE_ARTIFACT_KEY)

    locales: Dict[str, Any] = {}
    for code in sorted(reports):
        entry = audit.get(code) or {}
        locales[code] = {
            "merge": reports[code].to_dict(),
            "untranslated_before": entry.get("untranslated", "-"),
            "sections": entry.get("sections") or {},
            "written": written.get(code),
        }

    return {
        "run": {
            "run_id": ctx.run_id,
            "created_at": ctx.created_at.isoformat(),
            "dry_run": ctx.dry_run,
            "strict": bool(ctx.section("backfill").get("strict", False)),
        },
        "reference": reference.get("locale", "<unknown>"),
        "locales": locales,
    }


@dataclass
class ExportReportMdStep(Step):
    """Gera o relatório Markdown da run."""

    id: str = "export.report_md"
    kind: StepKind = StepKind.EXPORT
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "depends_on", ["backfill.merge"])

    def run(self, ctx: RunContext) -> StepResult:
        path_value = ctx.section("report").get("path")
        if path_value is None:
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SKIPPED,
                summary="report.path not configured",
                payload={"disabled": True},
            )

        try:
            if not isinstance(path_value, str) or not path_value.strip():
                raise ValueError("Invalid config: report.path must be a non-empty string")

            out_path = base_dir(ctx) / Path(path_value)
            content = generate_report_md(build_run_summary(ctx))
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(content, encoding="utf-8")

            payload = {"report_md_path": str(out_path), "bytes": out_path.stat().st_size}
            ctx.set_artifact(self.id, payload)
            ctx.log(step_id=self.id, level="info", message="export.report_md completed", **payload)

            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="export.report_md completed",
                artifacts={"report_md": str(out_path)},
                payload=payload,
            )

        except Exception as e:
            ctx.log(
                step_id=self.id,
                level="error",
                message="export.report_md failed",
                error_type=e.__class__.__name__,
                error_message=str(e) or "error",
            )
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=str(e) or "export.report_md failed",
                payload=failed_result_payload(e),
            )


__all__ = ["ExportReportMdStep", "build_run_summary"]
