"""Step canônico: locales.load

Responsabilidades:
- ler o Document reference (`locales.reference`) do LocaleStore
- ler cada Document alvo (`locales.targets`, ou todos os demais arquivos)
- publicar os Documents como artifacts `locales.reference` e `locales.targets`

Limites explícitos:
- NÃO altera nenhum Document
- NÃO escreve no filesystem

Com `locales.create_missing: true`, um alvo sem arquivo é carregado como
Document vazio (o backfill completo o cria a partir do reference).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from locale_backfill.core.config.hashing import compute_document_hash
from locale_backfill.core.pipeline.context import (
    REFERENCE_ARTIFACT_KEY,
    TARGETS_ARTIFACT_KEY,
    RunContext,
)
from locale_backfill.core.pipeline.step import Step
from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus
from locale_backfill.core.document.paths import count_leaf_keys
from locale_backfill.steps._common import (
    failed_result_payload,
    locale_store,
    reference_locale,
    target_locales,
)


@dataclass
class LoadLocalesStep(Step):
    """Carrega reference e alvos do diretório de locales."""

    id: str = "locales.load"
    kind: StepKind = StepKind.DIAGNOSTIC
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = []

    def run(self, ctx: RunContext) -> StepResult:
        try:
            store = locale_store(ctx)
            reference_code = reference_locale(ctx)
            create_missing = bool(ctx.section("locales").get("create_missing", False))

            reference = store.load(reference_code)
            targets: Dict[str, Dict[str, Any]] = {}
            created: List[str] = []
            for code in target_locales(ctx, store):
                if not store.exists(code) and create_missing:
                    created.append(code)
                    targets[code] = store.load_or_empty(code)
                else:
                    targets[code] = store.load(code)

            ctx.set_artifact(REFERENCE_ARTIFACT_KEY, {"locale": reference_code, "document": reference})
            ctx.set_artifact(TARGETS_ARTIFACT_KEY, targets)

            for code in created:
                msg = f"target locale '{code}' has no file; starting from an empty document"
                ctx.add_warning(step_id=self.id, message=msg)
                ctx.log(step_id=self.id, level="warning", message=msg, locale=code)

            ctx.log(
                step_id=self.id,
                level="info",
                message="locales loaded",
                directory=str(store.directory),
                reference=reference_code,
                targets=sorted(targets),
            )

            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary=f"loaded reference '{reference_code}' and {len(targets)} target(s)",
                metrics={
                    "targets": len(targets),
                    "reference_leaf_keys": count_leaf_keys(reference),
                    "created": len(created),
                },
                warnings=[],
                artifacts={"directory": str(store.directory)},
                payload={
                    "reference": {
                        "locale": reference_code,
                        "sha256": compute_document_hash(reference),
                    },
                    "targets": {
                        code: {"sha256": compute_document_hash(doc), "created": code in created}
                        for code, doc in sorted(targets.items())
                    },
                },
            )

        except Exception as e:
            ctx.log(
                step_id=self.id,
                level="error",
                message="locales.load failed",
                error_type=e.__class__.__name__,
                error_message=str(e) or "error",
            )
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=str(e) or "locales.load failed",
                payload=failed_result_payload(e),
            )


__all__ = ["LoadLocalesStep"]
