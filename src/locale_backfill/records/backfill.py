"""
Backfill de coleções de registros (id → Document).

Generaliza os scripts de migração de banco de documentos: cada registro
é mesclado contra um Document reference com uma FillFunction própria do
registro (ex.: lookup de coordenadas no documento `users/{id}`, ou
conversão de escala de rating). Registros alterados são entregues ao
callback `commit` em lotes de no máximo `batch_size` (500 é o limite de
escrita em lote do Firestore).

Regras:
    - registros cujo merge não altera nada contam como `skipped`
    - `dry_run=True` calcula tudo e não chama `commit`
    - uma FillFunctionError interrompe o backfill; lotes já entregues
      ao `commit` não são desfeitos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from locale_backfill.core.document.predicates import Document, deep_equals
from locale_backfill.core.merge.merger import ConflictHandler, FillFunction, KeyBackfillMerger
from locale_backfill.core.merge.report import MergeReport


DEFAULT_BATCH_SIZE = 500

Batch = List[Tuple[str, Document]]
CommitFunction = Callable[[Batch], None]


@dataclass
class RecordsBackfillResult:
    """Resumo de um backfill de registros."""

    migrated: int = 0
    skipped: int = 0
    batches_committed: int = 0
    dry_run: bool = False
    updates: Dict[str, Document] = field(default_factory=dict)
    report: MergeReport = field(default_factory=MergeReport)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "migrated": self.migrated,
            "skipped": self.skipped,
            "batches_committed": self.batches_committed,
            "dry_run": self.dry_run,
            "merge": self.report.to_dict(),
        }


def backfill_records(
    records: Mapping[str, Mapping[str, Any]],
    reference: Mapping[str, Any],
    fill_for: Callable[[str, Mapping[str, Any]], FillFunction],
    *,
    dry_run: bool = False,
    batch_size: int = DEFAULT_BATCH_SIZE,
    commit: Optional[CommitFunction] = None,
    strict: bool = False,
    on_conflict: Optional[ConflictHandler] = None,
) -> RecordsBackfillResult:
    """
    Mescla cada registro contra `reference` e entrega os alterados em lotes.

    Args:
        records: registros por id, em ordem de processamento.
        reference: formato de chaves que todo registro deve ter.
        fill_for: `(record_id, record) -> FillFunction` para aquele registro.
        dry_run: quando True, nenhum lote é entregue a `commit`.
        batch_size: tamanho máximo de cada lote (>= 1).
        commit: callback de escrita do lote; obrigatório fora de dry-run
            quando houver alterações.

    Raises:
        ValueError: batch_size inválido ou commit ausente fora de dry-run.
        FillFunctionError: propagada do merge.
    """
    if batch_size < 1:
        raise ValueError("batch_size deve ser >= 1")
    if not dry_run and commit is None:
        raise ValueError("commit é obrigatório quando dry_run=False")

    result = RecordsBackfillResult(dry_run=dry_run)
    pending: Batch = []

    def flush() -> None:
        if pending and not dry_run:
            commit(list(pending))
            result.batches_committed += 1
        pending.clear()

    for record_id, record in records.items():
        merger = KeyBackfillMerger(fill_for(record_id, record), strict=strict, on_conflict=on_conflict)
        record_report = MergeReport()
        merged = merger.merge(reference, record, report=record_report)
        result.report.absorb(record_report)

        if deep_equals(merged, dict(record)):
            result.skipped += 1
            continue

        result.migrated += 1
        result.updates[record_id] = merged
        pending.append((record_id, merged))
        if len(pending) >= batch_size:
            flush()

    flush()
    return result
