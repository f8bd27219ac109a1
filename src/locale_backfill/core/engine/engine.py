# src/locale_backfill/core/engine/engine.py
"""
Engine de execução do pipeline de backfill.

Políticas:
    - Ordem: `plan_execution` (topológica, empates por step id)
    - `steps.<id>.enabled: false` → SKIPPED ("skipped by config")
    - dependência FAILED ou SKIPPED → SKIPPED (nenhum Step roda sobre
      artefatos inexistentes)
    - exceção em `Step.run` → FAILED com ErrorPayload em payload["error"]
    - `engine.fail_fast` (default True) interrompe a run na primeira falha

O Engine não muta instâncias de StepResult (frozen): enriquecimentos
(warnings do RunContext) geram uma nova instância via `dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Sequence

from locale_backfill.core.errors import ENGINE_CONFIGURATION_ERROR, ErrorPayload, exception_to_payload
from locale_backfill.core.pipeline.context import RunContext
from locale_backfill.core.pipeline.step import Step
from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus

from .planner import plan_execution


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução de pipeline."""

    steps: Dict[str, StepResult] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return all(r.status != StepStatus.FAILED for r in self.steps.values())

    def status_of(self, step_id: str) -> StepStatus:
        return self.steps[step_id].status


class Engine:
    """Engine canônico do Locale Backfill (planner + executor)."""

    def __init__(self, *, steps: Sequence[Step], ctx: RunContext):
        self.steps: List[Step] = list(steps)
        self.ctx: RunContext = ctx

    def _is_enabled(self, step_id: str) -> bool:
        steps_cfg = (self.ctx.config or {}).get("steps", {}) or {}
        step_cfg = steps_cfg.get(step_id, {}) or {}
        return bool(step_cfg.get("enabled", True))

    def _fail_fast(self) -> bool:
        engine_cfg = (self.ctx.config or {}).get("engine", {}) or {}
        return bool(engine_cfg.get("fail_fast", True))

    def _ctx_warnings_for(self, step_id: str) -> List[str]:
        warnings_map = getattr(self.ctx, "warnings", {}) or {}
        return list(warnings_map.get(step_id, []) or [])

    def _enrich(self, *, step_id: str, step: Step, result: StepResult) -> StepResult:
        kind = getattr(result, "kind", None) or getattr(step, "kind", None) or StepKind.DIAGNOSTIC

        merged_w: List[str] = []
        seen = set()
        for msg in list(result.warnings or []) + self._ctx_warnings_for(step_id):
            if msg not in seen:
                merged_w.append(msg)
                seen.add(msg)

        return replace(result, step_id=step_id, kind=kind, warnings=merged_w)

    def _mk_result(
        self,
        *,
        step_id: str,
        step: Step,
        status: StepStatus,
        summary: str,
        payload: Dict[str, Any] | None = None,
    ) -> StepResult:
        r = StepResult(
            step_id=step_id,
            kind=getattr(step, "kind", None) or StepKind.DIAGNOSTIC,
            status=status,
            summary=summary,
            payload=dict(payload or {}),
        )
        return self._enrich(step_id=step_id, step=step, result=r)

    def run(self) -> RunResult:
        ordered = plan_execution(self.steps)

        results: Dict[str, StepResult] = {}
        for step in ordered:
            sid = step.id

            if not self._is_enabled(sid):
                results[sid] = self._mk_result(
                    step_id=sid, step=step, status=StepStatus.SKIPPED, summary="skipped by config"
                )
                self.ctx.log(step_id=sid, level="info", message="step skipped by config")
                continue

            deps = list(getattr(step, "depends_on", []) or [])
            blocked = [d for d in deps if d in results and results[d].status != StepStatus.SUCCESS]
            if blocked:
                failed_dep = any(results[d].status == StepStatus.FAILED for d in blocked)
                reason = "failed" if failed_dep else "skipped"
                results[sid] = self._mk_result(
                    step_id=sid,
                    step=step,
                    status=StepStatus.SKIPPED,
                    summary=f"skipped due to {reason} dependency",
                    payload={"blocked_by": blocked},
                )
                self.ctx.log(step_id=sid, level="info", message=f"step skipped: {reason} dependency", blocked_by=blocked)
                continue

            try:
                step_result = step.run(self.ctx)
                if not isinstance(step_result, StepResult):
                    raise TypeError("Step.run(ctx) must return StepResult")
                results[sid] = self._enrich(step_id=sid, step=step, result=step_result)

            except Exception as e:
                if isinstance(e, TypeError) and "must return StepResult" in str(e):
                    error = ErrorPayload(
                        type=ENGINE_CONFIGURATION_ERROR,
                        message="Step retornou tipo inválido",
                        details={"step_id": sid, "expected": "StepResult"},
                        hint="Ajuste o Step para retornar StepResult",
                    )
                else:
                    error = exception_to_payload(e, step_id=sid)

                self.ctx.log(
                    step_id=sid,
                    level="error",
                    message="step raised",
                    error_type=error.type,
                    error_message=error.message,
                )
                results[sid] = self._mk_result(
                    step_id=sid,
                    step=step,
                    status=StepStatus.FAILED,
                    summary=error.message,
                    payload={"error": error.to_dict()},
                )

            if results[sid].status == StepStatus.FAILED and self._fail_fast():
                break

        return RunResult(steps=results)
