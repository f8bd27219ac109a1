# tests/report/test_report_md.py
"""
Testes do gerador de relatório Markdown.

Cobertura:
- seções mínimas obrigatórias
- determinismo (mesmo resumo ⇒ mesmo Markdown)
- totais, conflitos e seções pendentes refletidos no texto
- falha explícita para resumo ausente
"""

import pytest

from locale_backfill.report import REQUIRED_SECTIONS, generate_report_md


def _summary() -> dict:
    return {
        "run": {"run_id": "run-001", "dry_run": True},
        "reference": "en",
        "locales": {
            "fr": {
                "merge": {"filled": 4, "changed": 3, "unchanged": 2, "conflicts": 1, "conflict_paths": ["profile"]},
                "untranslated_before": 5,
                "sections": {"matches": 2, "profile": 2, "common": 1},
                "written": None,
            },
            "de": {
                "merge": {"filled": 1, "changed": 0, "unchanged": 6, "conflicts": 0, "conflict_paths": []},
                "untranslated_before": 1,
                "sections": {"common": 1},
                "written": False,
            },
        },
    }


def test_required_sections_present():
    content = generate_report_md(_summary())

    for section in REQUIRED_SECTIONS:
        assert section in content
    assert content.endswith("\n")


def test_report_is_deterministic():
    assert generate_report_md(_summary()) == generate_report_md(_summary())


def test_totals_and_locale_rows():
    content = generate_report_md(_summary())

    assert "- **Keys filled**: `5` (changed: `3`)" in content
    assert "- **Structural conflicts**: `1`" in content
    assert "- **Dry run**: `True`" in content
    assert content.index("| `de` |") < content.index("| `fr` |")
    assert "not persisted" in content
    assert "unchanged |" in content


def test_conflicts_and_sections_listed():
    content = generate_report_md(_summary())

    assert "- `fr`: `profile`" in content
    assert "### fr" in content
    assert "- **matches**: 2" in content


def test_empty_locales_are_reported():
    content = generate_report_md({"run": {"run_id": "r"}, "reference": "en", "locales": {}})

    assert "No target locales were processed." in content
    assert "No structural conflicts." in content


@pytest.mark.parametrize("summary", [None, {}, []])
def test_missing_summary_raises(summary):
    with pytest.raises(ValueError):
        generate_report_md(summary)
