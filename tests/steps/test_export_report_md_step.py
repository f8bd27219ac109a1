# tests/steps/test_export_report_md_step.py
"""
Testes do Step export.report_md.
"""

from pathlib import Path

from locale_backfill.core.pipeline.types import StepStatus
from locale_backfill.steps.audit import AuditUntranslatedStep
from locale_backfill.steps.backfill import BackfillMergeStep
from locale_backfill.steps.export import ExportReportMdStep
from locale_backfill.steps.export.report_md import build_run_summary
from locale_backfill.steps.locales import LoadLocalesStep


def _prepared(ctx):
    LoadLocalesStep().run(ctx)
    AuditUntranslatedStep().run(ctx)
    BackfillMergeStep().run(ctx)
    return ctx


def test_report_is_written(backfill_ctx, tmp_path: Path):
    result = ExportReportMdStep().run(_prepared(backfill_ctx))

    assert result.status == StepStatus.SUCCESS
    content = (tmp_path / "out" / "report.md").read_text(encoding="utf-8")
    assert "# Backfill Report" in content
    assert "`run-test-backfill`" in content
    assert "### fr" in content


def test_summary_uses_audit_and_merge_artifacts(backfill_ctx):
    summary = build_run_summary(_prepared(backfill_ctx))

    fr = summary["locales"]["fr"]
    assert summary["reference"] == "en"
    assert fr["untranslated_before"] == 5
    assert fr["merge"]["filled"] == 5
    assert fr["written"] is None


def test_without_report_path_is_skipped(backfill_ctx):
    del backfill_ctx.config["report"]

    result = ExportReportMdStep().run(_prepared(backfill_ctx))

    assert result.status == StepStatus.SKIPPED


def test_invalid_report_path_fails(backfill_ctx):
    backfill_ctx.config["report"]["path"] = ""

    result = ExportReportMdStep().run(_prepared(backfill_ctx))

    assert result.status == StepStatus.FAILED
