# tests/conftest.py
"""
Fixtures compartilhados para testes do Locale Backfill.

Este módulo define fixtures reutilizáveis que fornecem:
- Documents reference/target determinísticos
- configuração mínima e já resolvida
- contexto de execução controlado (RunContext)
- diretório de locales temporário (tmp_path)
- Steps dummy para testes estruturais do engine

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Steps dummy utilizam duck typing em vez de herança
    - Imports do pacote são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa pipeline real
    - I/O apenas dentro de tmp_path
    - Dados retornados são novos a cada teste (sem estado compartilhado)
"""

import json
from datetime import datetime, timezone

import pytest


# =====================================================
# Documents
# =====================================================

@pytest.fixture
def reference_doc() -> dict:
    """Document reference (en) no formato típico de um arquivo de locale."""
    return {
        "common": {"save": "Save", "cancel": "Cancel"},
        "profile": {
            "title": "Profile",
            "fields": {"name": "Name", "age": "Age"},
        },
        "matches": {"count": "3 matches", "levels": ["Beginner", "Advanced"]},
    }


@pytest.fixture
def partial_target_doc() -> dict:
    """Target (fr) parcialmente traduzido, com uma chave exclusiva do target."""
    return {
        "common": {"save": "Enregistrer", "cancel": "Cancel"},
        "profile": {"title": "Profil"},
        "legacy": {"old_key": "ancienne valeur"},
    }


# =====================================================
# Config + RunContext
# =====================================================

@pytest.fixture
def dummy_config() -> dict:
    """
    Configuração mínima e já resolvida para testes do engine.

    Returns:
        dict: `fail_fast` explicitamente habilitado, sem Steps desabilitados.
    """
    return {
        "engine": {"fail_fast": True},
        "steps": {},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico (run_id e created_at fixos).

    Returns:
        RunContext: contexto isolado, sem artefatos nem eventos.
    """
    from locale_backfill.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def locales_dir(tmp_path, reference_doc, partial_target_doc):
    """
    Diretório `locales/` com en.json (reference) e fr.json (target parcial).

    Returns:
        Path: diretório de locales dentro de tmp_path.
    """
    d = tmp_path / "locales"
    d.mkdir()
    (d / "en.json").write_text(json.dumps(reference_doc, indent=2), encoding="utf-8")
    (d / "fr.json").write_text(json.dumps(partial_target_doc, indent=2), encoding="utf-8")
    return d


@pytest.fixture
def backfill_config() -> dict:
    """Configuração do job de backfill apontando para `locales/` relativo ao base_dir."""
    return {
        "engine": {"fail_fast": True},
        "locales": {"directory": "locales", "reference": "en", "targets": ["fr"]},
        "backfill": {
            "dry_run": False,
            "strict": False,
            "fill": {
                "fr": {
                    "dictionary": {"Cancel": "Annuler", "Name": "Nom", "Age": "Âge"},
                    "patterns": {"rules": [{"pattern": r"^(\d+) matches$", "template": r"\1 matchs"}]},
                }
            },
        },
        "report": {"path": "out/report.md"},
        "steps": {},
    }


@pytest.fixture
def backfill_ctx(tmp_path, locales_dir, backfill_config):
    """RunContext do job de backfill com base_dir = tmp_path."""
    from locale_backfill.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-backfill",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=backfill_config,
        meta={"base_dir": str(tmp_path)},
    )


# =====================================================
# Steps dummy
# =====================================================

@pytest.fixture
def DummyStep():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de um Step.

    O Step retornado registra `<id>.ok` no RunContext e sempre retorna SUCCESS.

    Returns:
        type: Classe _DummyStep que pode ser instanciada pelos testes.
    """
    from locale_backfill.core.pipeline.types import StepKind, StepResult, StepStatus

    class _DummyStep:
        def __init__(self, step_id: str = "locales.load", kind: StepKind = StepKind.DIAGNOSTIC, depends_on=None):
            self.id = step_id
            self.kind = kind
            self.depends_on = depends_on or []

        def run(self, ctx):
            ctx.set_artifact(f"{self.id}.ok", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
                artifacts={"ok": f"{self.id}.ok"},
                payload={"note": "dummy"},
            )

    return _DummyStep
