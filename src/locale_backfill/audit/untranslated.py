"""
Auditoria de chaves não traduzidas.

Uma folha do reference está "não traduzida" no target quando:
    - não existe no target, ou
    - existe com valor igual ao do reference (sinal padrão de "ainda não preenchido")

A auditoria é somente leitura e usa o mesmo predicado de igualdade do
merge, de modo que `len(find_untranslated(ref, t))` é exatamente o número
de folhas que o merge entregaria à FillFunction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

import pandas as pd

from locale_backfill.core.document.paths import iter_leaf_paths
from locale_backfill.core.document.predicates import deep_equals, is_plain_object


_MISSING = object()

FRAME_COLUMNS = ["path", "section", "reference", "current", "missing"]


@dataclass(frozen=True)
class UntranslatedKey:
    """Folha do reference ainda não preenchida no target."""

    path: str
    reference: Any
    current: Any
    missing: bool

    @property
    def section(self) -> str:
        return self.path.split(".", 1)[0]


def _lookup(document: Mapping[str, Any], path: str) -> Any:
    current: Any = document
    for part in path.split("."):
        if not is_plain_object(current) or part not in current:
            return _MISSING
        current = current[part]
    return current


def find_untranslated(reference: Mapping[str, Any], target: Mapping[str, Any]) -> List[UntranslatedKey]:
    """Lista, em ordem do reference, as folhas ausentes ou idênticas no target."""
    found: List[UntranslatedKey] = []
    for path, ref_val in iter_leaf_paths(reference):
        cur_val = _lookup(target, path)
        if cur_val is _MISSING or is_plain_object(cur_val):
            found.append(UntranslatedKey(path=path, reference=ref_val, current=None, missing=True))
        elif deep_equals(cur_val, ref_val):
            found.append(UntranslatedKey(path=path, reference=ref_val, current=cur_val, missing=False))
    return found


def untranslated_frame(reference: Mapping[str, Any], target: Mapping[str, Any]) -> pd.DataFrame:
    """Mesma informação de `find_untranslated` como DataFrame (colunas FRAME_COLUMNS)."""
    rows = [
        {
            "path": k.path,
            "section": k.section,
            "reference": k.reference,
            "current": k.current,
            "missing": k.missing,
        }
        for k in find_untranslated(reference, target)
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def section_counts(reference: Mapping[str, Any], target: Mapping[str, Any]) -> Dict[str, int]:
    """
    Contagem de chaves não traduzidas por seção de topo.

    Ordenado por contagem decrescente; empates por nome da seção.
    """
    frame = untranslated_frame(reference, target)
    if frame.empty:
        return {}
    counts = frame.groupby("section").size()
    ordered = sorted(counts.items(), key=lambda kv: (-int(kv[1]), str(kv[0])))
    return {str(section): int(count) for section, count in ordered}


def completion_ratio(reference: Mapping[str, Any], target: Mapping[str, Any]) -> float:
    """Fração das folhas do reference já preenchidas no target (1.0 para reference vazio)."""
    total = sum(1 for _ in iter_leaf_paths(reference))
    if total == 0:
        return 1.0
    return (total - len(find_untranslated(reference, target))) / total
