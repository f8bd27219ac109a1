# src/locale_backfill/core/merge/merger.py
"""
KeyBackfillMerger — merge idempotente de backfill de chaves.

Reconcilia recursivamente um Document target contra o formato de chaves
de um Document reference, preenchendo lacunas sem tocar em valores já
customizados.

Política de merge (v1):
    - resultado parte de uma cópia rasa do target (chaves só do target sobrevivem)
    - objeto no reference → recursão (target ausente vira {})
    - folha no reference:
        - target ausente ou igual ao reference → fill(path, valor_reference)
        - target divergente → mantido (no-clobber)
    - listas são folhas atômicas
    - objeto vs. folha → conflito estrutural:
        - padrão: registra, reinicia o slot e continua preenchendo
        - strict=True: levanta TypeMismatchError

Invariantes:
    - Toda folha do reference existe no resultado
    - Nenhuma folha divergente do target é sobrescrita
    - Chaves presentes apenas no target são preservadas
    - Nenhum input é mutado
    - merge(ref, merge(ref, t, f), f) == merge(ref, t, f) para toda f determinística

Limites explícitos:
    - Não realiza I/O
    - Não decide persistência
    - Não captura falhas da FillFunction (são propagadas como FillFunctionError)
"""

from __future__ import annotations

import json
from copy import deepcopy
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from locale_backfill.core.document.paths import join_path
from locale_backfill.core.document.predicates import Document, deep_equals, is_plain_object

from .errors import FillFunctionError, InvalidDocumentRootError, TypeMismatchError
from .report import MergeReport


FillFunction = Callable[[str, Any], Any]
ConflictHandler = Callable[[TypeMismatchError], None]

_MISSING = object()


def _require_root(document: Any, role: str) -> Mapping[str, Any]:
    if not is_plain_object(document):
        raise InvalidDocumentRootError(
            f"Raiz do {role} deve ser dict, recebido: {type(document).__name__}"
        )
    return document


def _checked_fill(fill: FillFunction, path: str, reference_value: Any) -> Any:
    try:
        value = fill(path, reference_value)
    except Exception as exc:
        raise FillFunctionError(path, f"{exc.__class__.__name__}: {exc}", exc) from exc

    if is_plain_object(value):
        raise FillFunctionError(path, "retornou um objeto onde era esperada uma folha")

    try:
        json.dumps(value)
    except (TypeError, ValueError) as exc:
        raise FillFunctionError(
            path, f"retornou valor não serializável ({type(value).__name__})", exc
        ) from exc

    if isinstance(value, list):
        return deepcopy(value)
    return value


class KeyBackfillMerger:
    """
    Merger de backfill configurado com uma FillFunction.

    Args:
        fill: função `(path, valor_reference) -> valor` total e pura.
        strict: quando True, conflitos estruturais levantam TypeMismatchError.
        on_conflict: callback opcional chamado para cada conflito recuperado
            (usado pelos Steps para registrar o evento no RunContext).
    """

    def __init__(
        self,
        fill: FillFunction,
        *,
        strict: bool = False,
        on_conflict: Optional[ConflictHandler] = None,
    ):
        self.fill = fill
        self.strict = strict
        self.on_conflict = on_conflict

    def merge(
        self,
        reference: Mapping[str, Any],
        target: Mapping[str, Any],
        path: str = "",
        report: Optional[MergeReport] = None,
    ) -> Document:
        """
        Retorna um novo Document: `target` completado com as chaves de `reference`.

        Raises:
            InvalidDocumentRootError: se reference ou target não forem dicts.
            TypeMismatchError: apenas em modo estrito.
            FillFunctionError: se a FillFunction falhar ou retornar valor inválido.
        """
        _require_root(reference, "reference")
        _require_root(target, "target")
        if report is None:
            report = MergeReport()
        return self._merge(reference, target, path, report)

    def merge_with_report(
        self,
        reference: Mapping[str, Any],
        target: Mapping[str, Any],
    ) -> Tuple[Document, MergeReport]:
        report = MergeReport()
        merged = self.merge(reference, target, report=report)
        return merged, report

    def _conflict(self, path: str, reference_value: Any, target_value: Any, report: MergeReport) -> None:
        error = TypeMismatchError(path, reference_value, target_value)
        if self.strict:
            raise error
        report.record_conflict(path)
        if self.on_conflict is not None:
            self.on_conflict(error)

    def _merge(
        self,
        reference: Mapping[str, Any],
        target: Mapping[str, Any],
        path: str,
        report: MergeReport,
    ) -> Document:
        result: Dict[str, Any] = dict(target)

        for key, ref_val in reference.items():
            cur_val = target.get(key, _MISSING)
            child_path = join_path(path, key)

            if is_plain_object(ref_val):
                if cur_val is _MISSING:
                    cur_val = {}
                elif not is_plain_object(cur_val):
                    self._conflict(child_path, ref_val, cur_val, report)
                    cur_val = {}
                result[key] = self._merge(ref_val, cur_val, child_path, report)
                continue

            if is_plain_object(cur_val):
                # folha no reference, objeto no target
                self._conflict(child_path, ref_val, cur_val, report)
                cur_val = _MISSING

            if cur_val is _MISSING or deep_equals(cur_val, ref_val):
                filled = _checked_fill(self.fill, child_path, ref_val)
                result[key] = filled
                report.record_fill(child_path, changed=not deep_equals(filled, ref_val))
            else:
                report.record_unchanged()

        return result


def merge(
    reference: Mapping[str, Any],
    target: Mapping[str, Any],
    fill: FillFunction,
    path: str = "",
    *,
    strict: bool = False,
    report: Optional[MergeReport] = None,
    on_conflict: Optional[ConflictHandler] = None,
) -> Document:
    """Atalho funcional para `KeyBackfillMerger(fill, ...).merge(...)`."""
    merger = KeyBackfillMerger(fill, strict=strict, on_conflict=on_conflict)
    return merger.merge(reference, target, path, report)
