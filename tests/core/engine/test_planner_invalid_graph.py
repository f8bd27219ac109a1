# tests/core/engine/test_planner_invalid_graph.py
"""
Testes de grafos inválidos no planner.

Ciclos e dependências inexistentes são falhas estruturais fatais,
detectadas antes de qualquer execução.
"""

import pytest

try:
    from locale_backfill.core.engine.planner import CycleDetectedError, UnknownDependencyError, plan_execution
except Exception as e:
    plan_execution = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing planner errors. Implement:
- src/locale_backfill/core/engine/planner.py (CycleDetectedError, UnknownDependencyError)
Import error: {_IMPORT_ERR}
""")


def test_cycle_detected(DummyStep):
    _require_imports()
    steps = [
        DummyStep(step_id="a", depends_on=["b"]),
        DummyStep(step_id="b", depends_on=["a"]),
    ]

    with pytest.raises(CycleDetectedError):
        plan_execution(steps)


def test_unknown_dependency(DummyStep):
    _require_imports()
    steps = [DummyStep(step_id="backfill.merge", depends_on=["locales.load"])]

    with pytest.raises(UnknownDependencyError):
        plan_execution(steps)
