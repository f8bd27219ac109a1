# tests/core/engine/test_planner_toposort.py
"""
Testes da ordenação topológica do planner.

Os testes asseguram que:
- dependências explícitas são respeitadas
- empates são resolvidos pela ordem lexicográfica de `step.id`
- a ordem independe da ordem de declaração dos Steps
- o pipeline canônico de backfill tem ordem estável
"""

import pytest

try:
    from locale_backfill.core.engine.planner import plan_execution
except Exception as e:
    plan_execution = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha antecipada e explícita quando o planner não pode ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing planner. Implement:
- src/locale_backfill/core/engine/planner.py (plan_execution)
Import error: {_IMPORT_ERR}
""")


def test_toposort_linear(DummyStep):
    _require_imports()
    steps = [
        DummyStep(step_id="c", depends_on=["b"]),
        DummyStep(step_id="a"),
        DummyStep(step_id="b", depends_on=["a"]),
    ]

    assert [s.id for s in plan_execution(steps)] == ["a", "b", "c"]


def test_toposort_ties_are_lexicographic(DummyStep):
    """
    Verifica o desempate determinístico entre Steps prontos ao mesmo tempo.

    Invariantes:
        - A mesma definição de pipeline produz sempre a mesma ordem
        - A ordem de declaração não influencia o resultado
    """
    _require_imports()
    declared = [
        DummyStep(step_id="export.report_md", depends_on=["backfill.merge"]),
        DummyStep(step_id="export.locales", depends_on=["backfill.merge"]),
        DummyStep(step_id="backfill.merge", depends_on=["locales.load"]),
        DummyStep(step_id="audit.untranslated", depends_on=["locales.load"]),
        DummyStep(step_id="locales.load"),
    ]

    first = [s.id for s in plan_execution(declared)]
    second = [s.id for s in plan_execution(list(reversed(declared)))]

    assert first == second == [
        "locales.load",
        "audit.untranslated",
        "backfill.merge",
        "export.locales",
        "export.report_md",
    ]


def test_duplicate_ids_are_rejected(DummyStep):
    _require_imports()
    with pytest.raises(ValueError):
        plan_execution([DummyStep(step_id="a"), DummyStep(step_id="a")])
