# src/locale_backfill/core/pipeline/step.py
"""
Contrato canônico de Step do pipeline de backfill.

Um Step é a menor unidade executável do pipeline: carrega locales, audita,
mescla ou exporta. Steps interagem exclusivamente via RunContext e
produzem um StepResult imutável.

Conformidade é garantida por duck typing (@runtime_checkable).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable, List

from .context import RunContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step.

    Atributos obrigatórios:
        - id: identificador único e estável do Step
        - kind: classificação semântica do Step (`StepKind`)
        - depends_on: lista de `step_id` dos Steps dos quais depende
    """

    id: str
    kind: StepKind
    depends_on: List[str]

    def run(self, ctx: RunContext) -> StepResult:
        """Executa a etapa uma única vez usando exclusivamente o RunContext."""
        ...
