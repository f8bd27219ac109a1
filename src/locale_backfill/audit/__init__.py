"""Auditoria somente leitura de cobertura de tradução."""

from .untranslated import (
    UntranslatedKey,
    completion_ratio,
    find_untranslated,
    section_counts,
    untranslated_frame,
)

__all__ = [
    "UntranslatedKey",
    "completion_ratio",
    "find_untranslated",
    "section_counts",
    "untranslated_frame",
]
