# src/locale_backfill/runner.py
"""
Montagem e execução do job de backfill de locales.

O job é o pipeline canônico:

    locales.load → audit.untranslated
                 → backfill.merge → export.locales
                                  → export.report_md

`run_backfill` recebe a configuração efetiva (ou os caminhos dos arquivos
de configuração, via `run_backfill_from_files`) e devolve o RunResult
junto com o RunContext, que carrega eventos, warnings e artefatos.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from locale_backfill.core.config.hashing import compute_config_hash
from locale_backfill.core.config.loader import load_config
from locale_backfill.core.engine.engine import Engine, RunResult
from locale_backfill.core.pipeline.context import RunContext
from locale_backfill.core.pipeline.registry import StepRegistry
from locale_backfill.core.pipeline.step import Step
from locale_backfill.steps.audit import AuditUntranslatedStep
from locale_backfill.steps.backfill import BackfillMergeStep
from locale_backfill.steps.export import ExportLocalesStep, ExportReportMdStep
from locale_backfill.steps.locales import LoadLocalesStep


def build_default_steps() -> List[Step]:
    registry = StepRegistry()
    registry.add(LoadLocalesStep())
    registry.add(AuditUntranslatedStep())
    registry.add(BackfillMergeStep())
    registry.add(ExportLocalesStep())
    registry.add(ExportReportMdStep())
    return registry.list()


def run_backfill(
    config: Dict[str, Any],
    *,
    base_dir: Union[str, Path] = ".",
    run_id: Optional[str] = None,
    steps: Optional[List[Step]] = None,
) -> Tuple[RunResult, RunContext]:
    """
    Executa o job de backfill com a configuração efetiva.

    Args:
        config: configuração já resolvida (defaults + local).
        base_dir: diretório base de caminhos relativos da config.
        run_id: identificador da run (gerado quando ausente).
        steps: pipeline alternativo (padrão: `build_default_steps()`).

    Returns:
        (RunResult, RunContext)
    """
    ctx = RunContext(
        run_id=run_id or uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        config=config,
        meta={"base_dir": str(base_dir), "config_hash": compute_config_hash(config)},
    )
    ctx.log(step_id="runner", level="info", message="run started", dry_run=ctx.dry_run)

    result = Engine(steps=steps if steps is not None else build_default_steps(), ctx=ctx).run()

    ctx.log(
        step_id="runner",
        level="info" if result.ok else "error",
        message="run finished",
        ok=result.ok,
        statuses={sid: r.status.value for sid, r in result.steps.items()},
    )
    return result, ctx


def run_backfill_from_files(
    *,
    defaults_path: Union[str, Path],
    local_path: Optional[Union[str, Path]] = None,
    run_id: Optional[str] = None,
) -> Tuple[RunResult, RunContext]:
    """Carrega a configuração e executa o job; caminhos relativos partem do diretório dos defaults."""
    config = load_config(defaults_path=defaults_path, local_path=local_path)
    return run_backfill(config, base_dir=Path(defaults_path).parent, run_id=run_id)
