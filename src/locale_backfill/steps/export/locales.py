"""
Step canônico: export.locales

Persiste no LocaleStore os Documents mesclados por `backfill.merge`.

Regras:
    - `backfill.dry_run: true` → SKIPPED, nada é escrito
    - um locale só é reescrito quando o hash canônico do Document mesclado
      difere do Document carregado (ou quando o arquivo ainda não existe)
    - cada arquivo é escrito de forma atômica pelo LocaleStore; uma falha
      interrompe o Step e os locales seguintes não são escritos

Publica `export.written`: {<locale>: bool} (True = arquivo escrito).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from locale_backfill.core.config.hashing import compute_document_hash
from locale_backfill.core.pipeline.context import MERGED_ARTIFACT_KEY, TARGETS_ARTIFACT_KEY, RunContext
from locale_backfill.core.pipeline.step import Step
from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus
from locale_backfill.steps._common import failed_result_payload, locale_store


WRITTEN_ARTIFACT_KEY = "export.written"


@dataclass
class ExportLocalesStep(Step):
    """Grava os locales alterados pelo backfill."""

    id: str = "export.locales"
    kind: StepKind = StepKind.EXPORT
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "depends_on", ["backfill.merge"])

    def run(self, ctx: RunContext) -> StepResult:
        if ctx.dry_run:
            ctx.log(step_id=self.id, level="info", message="dry run: no locale written")
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SKIPPED,
                summary="dry run: no locale written",
                payload={"dry_run": True},
            )

        try:
            store = locale_store(ctx)
            merged: Dict[str, Dict[str, Any]] = ctx.get_artifact(MERGED_ARTIFACT_KEY)
            loaded: Dict[str, Dict[str, Any]] = ctx.get_artifact(TARGETS_ARTIFACT_KEY)

            written: Dict[str, bool] = {}
            paths: Dict[str, str] = {}
            for code in sorted(merged):
                document = merged[code]
                before = loaded.get(code)
                if (
                    store.exists(code)
                    and before is not None
                    and compute_document_hash(before) == compute_document_hash(document)
                ):
                    written[code] = False
                    ctx.log(step_id=self.id, level="info", message="locale unchanged", locale=code)
                    continue

                path = store.save(code, document)
                written[code] = True
                paths[code] = str(path)
                ctx.log(step_id=self.id, level="info", message="locale written", locale=code, path=str(path))

            ctx.set_artifact(WRITTEN_ARTIFACT_KEY, written)

            count = sum(1 for w in written.values() if w)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary=f"{count} locale file(s) written",
                metrics={"written": count, "unchanged": len(written) - count},
                artifacts={"locales": paths},
                payload={"written": written},
            )

        except Exception as e:
            ctx.log(
                step_id=self.id,
                level="error",
                message="export.locales failed",
                error_type=e.__class__.__name__,
                error_message=str(e) or "error",
            )
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=str(e) or "export.locales failed",
                payload=failed_result_payload(e),
            )


__all__ = ["ExportLocalesStep", "WRITTEN_ARTIFACT_KEY"]
