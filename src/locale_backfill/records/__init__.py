"""Backfill em lote de coleções de registros (id → Document)."""

from .backfill import DEFAULT_BATCH_SIZE, RecordsBackfillResult, backfill_records

__all__ = ["DEFAULT_BATCH_SIZE", "RecordsBackfillResult", "backfill_records"]
