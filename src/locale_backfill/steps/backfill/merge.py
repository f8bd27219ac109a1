"""
Step canônico: backfill.merge

Executa o KeyBackfillMerger para cada locale alvo carregado por
`locales.load`, com a estratégia de preenchimento declarada em
`backfill.fill.<locale>` (identidade quando ausente).

Publica:
    - `backfill.merged`: {<locale>: Document mesclado}
    - `backfill.reports`: {<locale>: MergeReport}

Falhas:
    - FillFunctionError / TypeMismatchError (strict) → FAILED; nenhum
      Document mesclado é publicado, portanto nada é persistido.
    - Conflitos estruturais em modo não estrito → warnings do Step.

Limites explícitos:
    - NÃO escreve arquivos (responsabilidade de export.locales)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from locale_backfill.core.fill.loader import build_fill_strategy
from locale_backfill.core.merge.errors import TypeMismatchError
from locale_backfill.core.merge.merger import KeyBackfillMerger
from locale_backfill.core.merge.report import MergeReport
from locale_backfill.core.pipeline.context import (
    MERGED_ARTIFACT_KEY,
    REFERENCE_ARTIFACT_KEY,
    REPORTS_ARTIFACT_KEY,
    TARGETS_ARTIFACT_KEY,
    RunContext,
)
from locale_backfill.core.pipeline.step import Step
from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus
from locale_backfill.steps._common import base_dir, failed_result_payload


def _fill_specs(ctx: RunContext) -> Dict[str, Any]:
    fill = ctx.section("backfill").get("fill") or {}
    if not isinstance(fill, dict):
        raise ValueError("backfill.fill must be a mapping of locale -> fill sources")
    return fill


@dataclass
class BackfillMergeStep(Step):
    """Completa cada locale alvo com as chaves do reference."""

    id: str = "backfill.merge"
    kind: StepKind = StepKind.TRANSFORM
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "depends_on", ["locales.load"])

    def _conflict_handler(self, ctx: RunContext, locale: str):
        def _on_conflict(error: TypeMismatchError) -> None:
            msg = (
                f"{locale}: structural conflict at '{error.path}' "
                f"({error.reference_type} in reference, {error.target_type} in target); slot reset"
            )
            ctx.add_warning(step_id=self.id, message=msg)
            ctx.log(step_id=self.id, level="warning", message="structural conflict", locale=locale, path=error.path)

        return _on_conflict

    def run(self, ctx: RunContext) -> StepResult:
        try:
            reference = ctx.get_artifact(REFERENCE_ARTIFACT_KEY)["document"]
            targets: Dict[str, Dict[str, Any]] = ctx.get_artifact(TARGETS_ARTIFACT_KEY)
            fill_specs = _fill_specs(ctx)
            strict = bool(ctx.section("backfill").get("strict", False))
            root = base_dir(ctx)

            merged: Dict[str, Dict[str, Any]] = {}
            reports: Dict[str, MergeReport] = {}
            for code in sorted(targets):
                fill = build_fill_strategy(fill_specs.get(code), base_dir=root)
                merger = KeyBackfillMerger(fill, strict=strict, on_conflict=self._conflict_handler(ctx, code))
                merged[code], reports[code] = merger.merge_with_report(reference, targets[code])

                ctx.log(
                    step_id=self.id,
                    level="info",
                    message="locale merged",
                    locale=code,
                    fill=getattr(fill, "name", type(fill).__name__),
                    **{k: v for k, v in reports[code].to_dict().items() if k != "conflict_paths"},
                )

            ctx.set_artifact(MERGED_ARTIFACT_KEY, merged)
            ctx.set_artifact(REPORTS_ARTIFACT_KEY, reports)

            totals = MergeReport()
            for report in reports.values():
                totals.absorb(report)

            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary=f"{totals.filled} key(s) filled across {len(merged)} locale(s)",
                metrics={
                    "locales": len(merged),
                    "filled": totals.filled,
                    "changed": totals.changed,
                    "unchanged": totals.unchanged,
                    "conflicts": totals.conflicts,
                },
                payload={"locales": {code: r.to_dict() for code, r in reports.items()}, "strict": strict},
            )

        except Exception as e:
            ctx.log(
                step_id=self.id,
                level="error",
                message="backfill.merge failed",
                error_type=e.__class__.__name__,
                error_message=str(e) or "error",
            )
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=str(e) or "backfill.merge failed",
                payload=failed_result_payload(e),
            )


__all__ = ["BackfillMergeStep"]
