# tests/steps/test_export_locales_step.py
"""
Testes do Step export.locales.
"""

import json
from pathlib import Path

from locale_backfill.core.pipeline.context import MERGED_ARTIFACT_KEY
from locale_backfill.core.pipeline.types import StepStatus
from locale_backfill.steps.backfill import BackfillMergeStep
from locale_backfill.steps.export import ExportLocalesStep
from locale_backfill.steps.export.locales import WRITTEN_ARTIFACT_KEY
from locale_backfill.steps.locales import LoadLocalesStep


def _merged(ctx):
    LoadLocalesStep().run(ctx)
    BackfillMergeStep().run(ctx)
    return ctx


def test_writes_changed_locale(backfill_ctx, locales_dir: Path):
    result = ExportLocalesStep().run(_merged(backfill_ctx))

    assert result.status == StepStatus.SUCCESS
    assert result.metrics == {"written": 1, "unchanged": 0}
    written = json.loads((locales_dir / "fr.json").read_text(encoding="utf-8"))
    assert written == backfill_ctx.get_artifact(MERGED_ARTIFACT_KEY)["fr"]
    assert backfill_ctx.get_artifact(WRITTEN_ARTIFACT_KEY) == {"fr": True}


def test_unchanged_locale_is_not_rewritten(backfill_ctx, locales_dir: Path):
    backfill_ctx.config["backfill"]["fill"] = {}
    fr_path = locales_dir / "fr.json"
    fr_path.write_text(json.dumps(json.loads((locales_dir / "en.json").read_text(encoding="utf-8"))), encoding="utf-8")
    before = fr_path.read_text(encoding="utf-8")

    result = ExportLocalesStep().run(_merged(backfill_ctx))

    assert result.metrics == {"written": 0, "unchanged": 1}
    assert fr_path.read_text(encoding="utf-8") == before


def test_dry_run_skips_export(backfill_ctx, locales_dir: Path):
    backfill_ctx.config["backfill"]["dry_run"] = True
    before = (locales_dir / "fr.json").read_text(encoding="utf-8")

    result = ExportLocalesStep().run(_merged(backfill_ctx))

    assert result.status == StepStatus.SKIPPED
    assert result.payload == {"dry_run": True}
    assert (locales_dir / "fr.json").read_text(encoding="utf-8") == before


def test_missing_merge_artifact_fails(backfill_ctx):
    result = ExportLocalesStep().run(backfill_ctx)

    assert result.status == StepStatus.FAILED
