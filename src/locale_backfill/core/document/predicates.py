# src/locale_backfill/core/document/predicates.py
"""
Predicados canônicos sobre Documents do Locale Backfill.

Um Document é um mapeamento `str -> valor`, onde valor pode ser:
    - string, número, booleano ou None (folhas)
    - lista (folha atômica, nunca mesclada elemento a elemento)
    - outro Document (objeto aninhado)

Este módulo concentra o único predicado de "objeto simples" usado em todo
o pacote e a igualdade estrutural usada para detectar valores ainda não
preenchidos (target idêntico ao reference).

Invariantes:
    - `None` nunca é um objeto simples
    - listas nunca são objetos simples
    - `True` e `1` não são considerados iguais

Limites explícitos:
    - Não realiza merge
    - Não valida chaves (apenas o formato dos valores)
"""

from __future__ import annotations

from typing import Any, Dict


Document = Dict[str, Any]


def is_plain_object(value: Any) -> bool:
    """
    Indica se `value` é um objeto simples (dict) no qual o merge pode recursar.

    Listas e `None` retornam False explicitamente.

    Args:
        value (Any): Valor arbitrário de um Document.

    Returns:
        bool: True apenas para instâncias de dict.
    """
    return isinstance(value, dict)


def is_leaf(value: Any) -> bool:
    """Valor terminal de um Document (tudo que não é objeto simples)."""
    return not is_plain_object(value)


def deep_equals(a: Any, b: Any) -> bool:
    """
    Igualdade estrutural entre dois valores de Document.

    Regras:
        - bool só é igual a bool (evita `True == 1` do Python)
        - dicts comparam o mesmo conjunto de chaves, recursivamente
        - listas comparam elemento a elemento, na ordem
        - demais valores usam `==`

    Args:
        a (Any): Primeiro valor.
        b (Any): Segundo valor.

    Returns:
        bool: True se os valores forem estruturalmente iguais.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b

    if is_plain_object(a) or is_plain_object(b):
        if not (is_plain_object(a) and is_plain_object(b)):
            return False
        if a.keys() != b.keys():
            return False
        return all(deep_equals(a[k], b[k]) for k in a)

    if isinstance(a, list) or isinstance(b, list):
        if not (isinstance(a, list) and isinstance(b, list)):
            return False
        if len(a) != len(b):
            return False
        return all(deep_equals(x, y) for x, y in zip(a, b))

    return a == b
