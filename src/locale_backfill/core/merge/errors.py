# src/locale_backfill/core/merge/errors.py
"""
Exceções canônicas do merge de backfill.

Hierarquia:
    - BackfillError
        - InvalidDocumentRootError → raiz de Document não é dict
        - TypeMismatchError        → objeto vs. folha na mesma chave
        - FillFunctionError        → estratégia de preenchimento violou o contrato

Decisões arquiteturais:
    - TypeMismatchError é recuperável por padrão (o merger registra e segue);
      apenas o modo estrito a levanta
    - FillFunctionError nunca é suprimida: continuar poderia corromper o Document
    - Toda exceção carrega `path` (caminho pontuado da chave) quando aplicável
"""

from __future__ import annotations

from typing import Any, Optional


class BackfillError(Exception):
    """Exceção base do Locale Backfill."""


class InvalidDocumentRootError(BackfillError):
    """
    Levantada quando a raiz de um Document não é um objeto simples.

    Listas, escalares e `None` não são aceitos como raiz de reference ou target.
    """


class TypeMismatchError(BackfillError):
    """
    Conflito estrutural: reference e target divergem entre objeto e folha.

    Exemplo:
        - reference: {"a": {"b": "X"}}
        - target:    {"a": "not-an-object"}

    Attributes:
        path: caminho pontuado da chave em conflito.
        reference_type: nome do tipo no reference.
        target_type: nome do tipo no target.
    """

    def __init__(self, path: str, reference_value: Any, target_value: Any):
        self.path = path
        self.reference_type = type(reference_value).__name__
        self.target_type = type(target_value).__name__
        super().__init__(
            f"Conflito de tipo na chave '{path}': "
            f"reference={self.reference_type} vs target={self.target_type}"
        )


class FillFunctionError(BackfillError):
    """
    A função de preenchimento falhou ou retornou um valor inválido.

    Attributes:
        path: caminho da folha sendo preenchida.
        cause: exceção original, quando houver.
    """

    def __init__(self, path: str, message: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Falha no preenchimento de '{path}': {message}")
