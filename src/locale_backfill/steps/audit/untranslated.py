"""
Step canônico: audit.untranslated

Mede, por locale alvo e ANTES do backfill, quantas folhas do reference
estão ausentes ou idênticas ao reference, agrupadas por seção de topo.

Publica em `audit.untranslated`:

    {<locale>: {"untranslated": int, "missing": int, "completion": float,
                "sections": {<seção>: int, ...}}}

Somente leitura: não altera Documents nem escreve arquivos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from locale_backfill.audit.untranslated import completion_ratio, section_counts, untranslated_frame
from locale_backfill.core.pipeline.context import (
    AUDIT_ARTIFACT_KEY,
    REFERENCE_ARTIFACT_KEY,
    TARGETS_ARTIFACT_KEY,
    RunContext,
)
from locale_backfill.core.pipeline.step import Step
from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus
from locale_backfill.steps._common import failed_result_payload


def _audit_locale(reference: Dict[str, Any], target: Dict[str, Any]) -> Dict[str, Any]:
    frame = untranslated_frame(reference, target)
    return {
        "untranslated": int(len(frame)),
        "missing": int(frame["missing"].sum()) if not frame.empty else 0,
        "completion": round(completion_ratio(reference, target), 4),
        "sections": section_counts(reference, target),
    }


@dataclass
class AuditUntranslatedStep(Step):
    """Auditoria de chaves não traduzidas por locale e seção."""

    id: str = "audit.untranslated"
    kind: StepKind = StepKind.DIAGNOSTIC
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "depends_on", ["locales.load"])

    def run(self, ctx: RunContext) -> StepResult:
        try:
            reference = ctx.get_artifact(REFERENCE_ARTIFACT_KEY)["document"]
            targets: Dict[str, Dict[str, Any]] = ctx.get_artifact(TARGETS_ARTIFACT_KEY)

            audit: Dict[str, Dict[str, Any]] = {}
            for code in sorted(targets):
                audit[code] = _audit_locale(reference, targets[code])
                ctx.log(
                    step_id=self.id,
                    level="info",
                    message="locale audited",
                    locale=code,
                    untranslated=audit[code]["untranslated"],
                )

            ctx.set_artifact(AUDIT_ARTIFACT_KEY, audit)

            total = sum(entry["untranslated"] for entry in audit.values())
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary=f"{total} untranslated key(s) across {len(audit)} locale(s)",
                metrics={"locales": len(audit), "untranslated": total},
                payload={"locales": audit},
            )

        except Exception as e:
            ctx.log(
                step_id=self.id,
                level="error",
                message="audit.untranslated failed",
                error_type=e.__class__.__name__,
                error_message=str(e) or "error",
            )
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=str(e) or "audit.untranslated failed",
                payload=failed_result_payload(e),
            )


__all__ = ["AuditUntranslatedStep"]
