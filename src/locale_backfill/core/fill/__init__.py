"""
Estratégias plugáveis de preenchimento (FillFunction).

O merge não conhece dicionários nem padrões: recebe apenas um callable
`(path, valor_reference) -> valor`. Este pacote fornece as estratégias
observadas nos scripts de tradução e de migração, e a montagem delas a
partir da configuração do job.
"""

from .strategies import (
    ChainFill,
    DictionaryFill,
    FillStrategy,
    IdentityFill,
    LookupFill,
    PathDictionaryFill,
    PatternFill,
    TransformFill,
    ntrp_to_ltr,
)

__all__ = [
    "ChainFill",
    "DictionaryFill",
    "FillStrategy",
    "IdentityFill",
    "LookupFill",
    "PathDictionaryFill",
    "PatternFill",
    "TransformFill",
    "ntrp_to_ltr",
]
