"""
Locale Backfill — Canonical Error Structures (v1)

Erros que chegam ao operador (StepResult.payload["error"], report.md) são
convertidos para um payload serializável, com código estável e dica de
correção. Stack traces nunca entram no payload.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from locale_backfill.core.config.errors import ConfigError
from locale_backfill.core.merge.errors import (
    FillFunctionError,
    InvalidDocumentRootError,
    TypeMismatchError,
)
from locale_backfill.store.errors import LocaleDecodeError, LocaleNotFoundError, LocalePersistenceError


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Merge
STRUCTURAL_MISMATCH = "STRUCTURAL_MISMATCH"
FILL_FUNCTION_FAILURE = "FILL_FUNCTION_FAILURE"
INVALID_DOCUMENT_ROOT = "INVALID_DOCUMENT_ROOT"

# Locale store
LOCALE_NOT_FOUND = "LOCALE_NOT_FOUND"
MALFORMED_LOCALE = "MALFORMED_LOCALE"
PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"

# Configuração / Engine
CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


_HINTS = {
    STRUCTURAL_MISMATCH: "Corrija o tipo da chave no target ou execute sem modo estrito para reiniciar o slot.",
    FILL_FUNCTION_FAILURE: "A estratégia de preenchimento deve ser total e retornar apenas folhas serializáveis.",
    INVALID_DOCUMENT_ROOT: "O arquivo de locale deve conter um objeto JSON na raiz.",
    LOCALE_NOT_FOUND: "Verifique locales.directory e os códigos em locales.reference/locales.targets.",
    MALFORMED_LOCALE: "Corrija a sintaxe JSON do arquivo indicado em details.path (linha/coluna na mensagem).",
    PERSISTENCE_FAILURE: "Nenhuma escrita parcial foi feita; corrija permissões/espaço e reexecute o job.",
    CONFIGURATION_ERROR: "Revise os arquivos de configuração e as fontes de preenchimento declaradas.",
    ENGINE_EXECUTION_ERROR: "Verifique os eventos do run para diagnosticar a falha. Nenhum fallback é aplicado.",
}


def error_type_for(exc: BaseException) -> str:
    """Mapeia uma exceção para o código estável do catálogo."""
    if isinstance(exc, TypeMismatchError):
        return STRUCTURAL_MISMATCH
    if isinstance(exc, FillFunctionError):
        return FILL_FUNCTION_FAILURE
    if isinstance(exc, InvalidDocumentRootError):
        return INVALID_DOCUMENT_ROOT
    if isinstance(exc, LocaleNotFoundError):
        return LOCALE_NOT_FOUND
    if isinstance(exc, LocaleDecodeError):
        return MALFORMED_LOCALE
    if isinstance(exc, LocalePersistenceError):
        return PERSISTENCE_FAILURE
    if isinstance(exc, ConfigError):
        return CONFIGURATION_ERROR
    return ENGINE_EXECUTION_ERROR


def exception_to_payload(exc: BaseException, **details: Any) -> ErrorPayload:
    """
    Converte uma exceção em ErrorPayload.

    Campos conhecidos das exceções do pacote (ex.: `path`) entram em
    `details`; o restante vem dos kwargs.
    """
    code = error_type_for(exc)
    merged: Dict[str, Any] = {"exception_class": exc.__class__.__name__}
    path = getattr(exc, "path", None)
    if isinstance(path, str):
        merged["path"] = path
    merged.update(details)
    return ErrorPayload(
        type=code,
        message=str(exc) or "Erro inesperado durante execução",
        details=merged,
        hint=_HINTS.get(code),
    )
