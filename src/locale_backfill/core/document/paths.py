# src/locale_backfill/core/document/paths.py
"""
Utilitários de caminhos pontuados ("a.b.c") sobre Documents.

Usados pelo merger (caminho passado à FillFunction), pela auditoria de
chaves não traduzidas e pela conversão de dicionários planos
(`{"editProfile.gender.hint": "Opcional"}`) em Documents aninhados.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Tuple

from locale_backfill.core.merge.errors import TypeMismatchError

from .predicates import Document, is_plain_object


_MISSING = object()


def join_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def iter_leaf_paths(document: Mapping[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """Itera `(path, valor)` para cada folha, em ordem de inserção."""
    for key, value in document.items():
        path = join_path(prefix, key)
        if is_plain_object(value):
            yield from iter_leaf_paths(value, path)
        else:
            yield path, value


def count_leaf_keys(document: Mapping[str, Any]) -> int:
    return sum(1 for _ in iter_leaf_paths(document))


def flatten(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Document aninhado → dict plano `path -> folha`."""
    return dict(iter_leaf_paths(document))


def get_path(document: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """
    Resolve um caminho pontuado dentro de um Document.

    Retorna `default` quando qualquer segmento não existe ou quando um
    segmento intermediário não é objeto.
    """
    current: Any = document
    for part in path.split("."):
        if not is_plain_object(current):
            return default
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return default
    return current


def has_path(document: Mapping[str, Any], path: str) -> bool:
    return get_path(document, path, _MISSING) is not _MISSING


def keys_to_nested(flat: Mapping[str, Any]) -> Document:
    """
    Converte um dicionário de chaves pontuadas em Document aninhado.

    Exemplo:
        {"a.b": "x", "a.c": "y"} → {"a": {"b": "x", "c": "y"}}

    Raises:
        TypeMismatchError: se um caminho exigir recursão em uma folha já
            atribuída (ex.: "a" e "a.b" no mesmo dicionário).
    """
    result: Document = {}
    for flat_key, value in flat.items():
        parts = flat_key.split(".")
        current = result
        walked = ""
        for part in parts[:-1]:
            walked = join_path(walked, part)
            node = current.setdefault(part, {})
            if not is_plain_object(node):
                raise TypeMismatchError(walked, {}, node)
            current = node
        leaf = parts[-1]
        if is_plain_object(current.get(leaf)):
            raise TypeMismatchError(flat_key, value, current[leaf])
        current[leaf] = value
    return result
