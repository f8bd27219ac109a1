"""
Modelo de Document do Locale Backfill.

Um Document é o mapeamento JSON-compatível lido de um arquivo de locale
(ou de um registro de banco de documentos): chaves string, folhas
escalares ou listas atômicas, e objetos aninhados.
"""

from .predicates import Document, deep_equals, is_leaf, is_plain_object
from .paths import (
    count_leaf_keys,
    flatten,
    get_path,
    has_path,
    iter_leaf_paths,
    join_path,
    keys_to_nested,
)

__all__ = [
    "Document",
    "deep_equals",
    "is_leaf",
    "is_plain_object",
    "count_leaf_keys",
    "flatten",
    "get_path",
    "has_path",
    "iter_leaf_paths",
    "join_path",
    "keys_to_nested",
]
