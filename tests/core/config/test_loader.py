# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config / load_mapping_file).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional
- YAML e JSON são aceitos; outros formatos são rejeitados
- a raiz deve ser um dicionário
- a configuração final reflete o deep-merge defaults + local

Limites explícitos:
    - Não valida semântica das chaves do job
    - Não valida hashing de configuração
"""

import json
from pathlib import Path

import pytest

try:
    from locale_backfill.core.config.loader import load_config, load_mapping_file
    from locale_backfill.core.config.errors import (
        ConfigFileNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    load_mapping_file = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


DEFAULTS_YAML = """\
engine:
  fail_fast: true
locales:
  directory: locales
  reference: en
backfill:
  dry_run: false
  strict: false
steps:
  audit.untranslated:
    enabled: true
"""

LOCAL_YAML = """\
backfill:
  dry_run: true
steps:
  audit.untranslated:
    enabled: false
"""


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam disponíveis.

    Falha imediatamente com mensagem apontando os módulos esperados,
    em vez de erros indiretos nos testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/locale_backfill/core/config/loader.py (load_config)\n"
            "- src/locale_backfill/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que a ausência do arquivo defaults é tratada como erro fatal.

    Invariantes:
        - Nenhuma configuração implícita é gerada
        - O erro é tipado (ConfigFileNotFoundError)
    """
    _require_imports()
    missing = tmp_path / "defaults.yaml"

    with pytest.raises(ConfigFileNotFoundError):
        load_config(defaults_path=str(missing), local_path=None)


def test_missing_local_is_ok(tmp_path: Path):
    """Um caminho local inexistente é ignorado e os defaults valem integralmente."""
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))

    assert out["engine"]["fail_fast"] is True
    assert out["backfill"]["dry_run"] is False
    assert out["steps"]["audit.untranslated"]["enabled"] is True


def test_load_defaults_and_local(tmp_path: Path):
    """
    Verifica o merge defaults + local.

    O resultado deve refletir:
        - overrides do local onde declarados
        - valores dos defaults onde o local é omisso
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local.write_text(LOCAL_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))

    assert out["backfill"]["dry_run"] is True
    assert out["backfill"]["strict"] is False
    assert out["steps"]["audit.untranslated"]["enabled"] is False
    assert out["locales"]["reference"] == "en"


def test_json_config_is_accepted(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text(json.dumps({"locales": {"reference": "en"}}), encoding="utf-8")

    out = load_config(defaults_path=str(defaults))

    assert out == {"locales": {"reference": "en"}}


def test_empty_file_is_empty_mapping(tmp_path: Path):
    _require_imports()
    empty_yaml = tmp_path / "empty.yaml"
    empty_yaml.write_text("", encoding="utf-8")
    empty_json = tmp_path / "empty.json"
    empty_json.write_text("  \n", encoding="utf-8")

    assert load_mapping_file(empty_yaml) == {}
    assert load_mapping_file(empty_json) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    """Listas ou escalares na raiz são rejeitados (InvalidConfigRootTypeError)."""
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("engine = { fail_fast = true }\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)
