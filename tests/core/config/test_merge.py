# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são rejeitados explicitamente, com o caminho da chave
- objetos de entrada não são mutados durante o merge
"""

import pytest

try:
    from locale_backfill.core.config.merge import deep_merge
    from locale_backfill.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing deep-merge implementation. Implement:\n"
            "- src/locale_backfill/core/config/merge.py (deep_merge)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_scalar_override():
    _require_imports()
    base = {"backfill": {"dry_run": False}}
    override = {"backfill": {"dry_run": True}}

    assert deep_merge(base, override) == {"backfill": {"dry_run": True}}


def test_nested_dicts_merge_recursively():
    """
    Verifica que dicionários aninhados são combinados chave a chave.

    Invariantes:
        - Chaves apenas do base são preservadas
        - Chaves apenas do override são adicionadas
    """
    _require_imports()
    base = {"locales": {"directory": "locales", "reference": "en"}}
    override = {"locales": {"reference": "en-GB", "targets": ["fr"]}}

    out = deep_merge(base, override)

    assert out == {"locales": {"directory": "locales", "reference": "en-GB", "targets": ["fr"]}}


def test_lists_are_replaced_not_merged():
    _require_imports()
    base = {"locales": {"targets": ["fr", "de"]}}
    override = {"locales": {"targets": ["it"]}}

    assert deep_merge(base, override)["locales"]["targets"] == ["it"]


def test_int_and_float_are_interchangeable():
    _require_imports()
    out = deep_merge({"records": {"ratio": 1}}, {"records": {"ratio": 0.5}})

    assert out["records"]["ratio"] == 0.5


def test_type_conflict_raises_with_key_path():
    """Dict vs. lista na mesma chave é conflito fatal, nomeando o caminho pontuado."""
    _require_imports()
    base = {"backfill": {"fill": {"fr": {"dictionary": "dicts/fr.yaml"}}}}
    override = {"backfill": {"fill": ["fr"]}}

    with pytest.raises(ConfigTypeConflictError) as exc_info:
        deep_merge(base, override)

    assert "backfill.fill" in str(exc_info.value)


def test_bool_is_not_numeric():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"engine": {"fail_fast": True}}, {"engine": {"fail_fast": 1}})


def test_inputs_are_not_mutated():
    _require_imports()
    base = {"locales": {"targets": ["fr"]}, "engine": {"fail_fast": True}}
    override = {"locales": {"targets": ["de"]}}

    out = deep_merge(base, override)
    out["engine"]["fail_fast"] = False
    out["locales"]["targets"].append("es")

    assert base == {"locales": {"targets": ["fr"]}, "engine": {"fail_fast": True}}
    assert override == {"locales": {"targets": ["de"]}}
