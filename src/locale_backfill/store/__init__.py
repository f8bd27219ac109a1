"""Persistência de Documents de locale (um arquivo JSON por idioma)."""

from .errors import LocaleDecodeError, LocaleNotFoundError, LocalePersistenceError, LocaleStoreError
from .locale_store import LocaleStore, dumps_locale

__all__ = [
    "LocaleDecodeError",
    "LocaleNotFoundError",
    "LocalePersistenceError",
    "LocaleStoreError",
    "LocaleStore",
    "dumps_locale",
]
