# tests/records/test_records_backfill.py
"""
Testes do backfill em lote de registros (id → Document).

Cenários inspirados nas migrações de banco de documentos:
- coordenadas copiadas de um segundo documento por registro
- conversão de escala de rating com contagem migrated/skipped
- lotes limitados por `batch_size` e dry-run sem escrita
"""

import pytest

from locale_backfill.core.fill.strategies import LookupFill, TransformFill, ntrp_to_ltr
from locale_backfill.core.merge.errors import FillFunctionError
from locale_backfill.records import DEFAULT_BATCH_SIZE, backfill_records


USERS = {
    "u1": {"coords": {"latitude": 48.85, "longitude": 2.35}},
    "u2": {"coords": {"latitude": 45.76, "longitude": 4.83}},
}


def test_coordinate_backfill_from_second_document():
    records = {
        "u1": {"name": "Ana"},
        "u2": {"name": "Rui", "coords": {"latitude": 45.76, "longitude": 4.83}},
    }
    reference = {"coords": {"latitude": None, "longitude": None}}
    commits = []

    result = backfill_records(
        records,
        reference,
        lambda record_id, record: LookupFill(USERS[record_id]),
        commit=commits.append,
    )

    assert result.migrated == 1
    assert result.skipped == 1
    assert result.updates == {"u1": {"name": "Ana", "coords": {"latitude": 48.85, "longitude": 2.35}}}
    assert commits == [[("u1", result.updates["u1"])]]
    assert records["u1"] == {"name": "Ana"}


def test_rating_migration_counts_and_batches():
    records = {f"p{i}": {"ntrp": 3.0} for i in range(5)}
    records["p_done"] = {"ntrp": 3.0, "ltr": 5}

    def fill_for(record_id, record):
        return TransformFill(lambda _value: ntrp_to_ltr(record.get("ntrp")), paths=["ltr"])

    commits = []
    result = backfill_records(records, {"ltr": None}, fill_for, batch_size=2, commit=commits.append)

    assert result.migrated == 5
    assert result.skipped == 1
    assert [len(batch) for batch in commits] == [2, 2, 1]
    assert result.batches_committed == 3
    assert all(doc["ltr"] == 5 for doc in result.updates.values())


def test_dry_run_never_commits():
    records = {"u1": {}}
    result = backfill_records(
        records,
        {"coords": {"latitude": None}},
        lambda rid, rec: LookupFill(USERS[rid]),
        dry_run=True,
    )

    assert result.dry_run is True
    assert result.migrated == 1
    assert result.batches_committed == 0
    assert result.to_dict()["merge"]["filled"] == 1


def test_invalid_arguments():
    with pytest.raises(ValueError):
        backfill_records({}, {}, lambda r, d: None, batch_size=0, dry_run=True)
    with pytest.raises(ValueError):
        backfill_records({}, {}, lambda r, d: None)
    assert DEFAULT_BATCH_SIZE == 500


def test_fill_failure_stops_backfill_after_committed_batches():
    records = {"a": {}, "b": {}, "c": {}}

    def fill_for(record_id, record):
        if record_id == "c":
            return lambda path, value: 1 / 0
        return lambda path, value: record_id

    commits = []
    with pytest.raises(FillFunctionError):
        backfill_records(records, {"x": None}, fill_for, batch_size=1, commit=commits.append)

    assert [batch[0][0] for batch in commits] == ["a", "b"]
