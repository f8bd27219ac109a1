# src/locale_backfill/core/merge/report.py
"""
Contadores observáveis de uma execução de merge.

Equivalentes aos contadores "translated / kept-as-is / missing" dos
scripts de tradução: são o único canal lateral do merge além do
Document resultante.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class MergeReport:
    """
    Resumo de um merge reference → target.

    Campos:
        - filled: folhas entregues à FillFunction (ausentes ou iguais ao reference)
        - changed: subconjunto de `filled` cujo valor final difere do reference
        - unchanged: folhas já customizadas, mantidas intactas
        - conflicts: conflitos estruturais (objeto vs. folha) recuperados
    """

    filled: int = 0
    changed: int = 0
    unchanged: int = 0
    conflicts: int = 0
    filled_paths: List[str] = field(default_factory=list)
    conflict_paths: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.filled + self.unchanged

    def record_fill(self, path: str, *, changed: bool) -> None:
        self.filled += 1
        self.filled_paths.append(path)
        if changed:
            self.changed += 1

    def record_unchanged(self) -> None:
        self.unchanged += 1

    def record_conflict(self, path: str) -> None:
        self.conflicts += 1
        self.conflict_paths.append(path)

    def absorb(self, other: "MergeReport") -> None:
        """Acumula os contadores de outro relatório (ex.: vários registros)."""
        self.filled += other.filled
        self.changed += other.changed
        self.unchanged += other.unchanged
        self.conflicts += other.conflicts
        self.filled_paths.extend(other.filled_paths)
        self.conflict_paths.extend(other.conflict_paths)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filled": self.filled,
            "changed": self.changed,
            "unchanged": self.unchanged,
            "conflicts": self.conflicts,
            "conflict_paths": list(self.conflict_paths),
        }
