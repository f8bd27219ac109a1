"""Exceções do armazenamento de locales em disco."""

from __future__ import annotations

from typing import Optional

from locale_backfill.core.merge.errors import BackfillError


class LocaleStoreError(BackfillError):
    """Base para falhas de leitura/escrita de arquivos de locale."""

    def __init__(self, message: str, *, locale: Optional[str] = None, path: Optional[str] = None):
        self.locale = locale
        self.path = path
        super().__init__(message)


class LocaleNotFoundError(LocaleStoreError):
    """Arquivo `<locale>.json` inexistente no diretório de locales."""


class LocalePersistenceError(LocaleStoreError):
    """Falha ao gravar um locale; o arquivo original permanece intacto."""


class LocaleDecodeError(LocaleStoreError):
    """Arquivo de locale existe mas não contém JSON válido."""
