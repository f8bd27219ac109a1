# src/locale_backfill/__init__.py
"""
Locale Backfill — merge profundo com backfill idempotente de chaves.

Reconcilia Documents JSON aninhados (arquivos de locale, registros de
banco de documentos) contra um Document reference: toda chave do
reference passa a existir no target, valores já customizados nunca são
sobrescritos e lacunas são preenchidas por uma estratégia plugável.

Arquitetura em alto nível:
    - core.document → predicados e caminhos pontuados sobre Documents
    - core.merge    → KeyBackfillMerger, MergeReport e exceções do merge
    - core.fill     → estratégias de preenchimento (dicionário, padrões, lookup)
    - core.config   → carregamento, merge e hashing de configuração
    - core.pipeline / core.engine → Steps, RunContext, planner e engine
    - store         → leitura e escrita atômica de `<locale>.json`
    - audit         → chaves não traduzidas por seção
    - records       → backfill em lote de coleções de registros
    - runner        → job canônico de backfill de locales

Limites explícitos:
    - Não traduz texto: apenas aplica a estratégia configurada
    - Não apaga chaves presentes apenas no target
"""

from locale_backfill.core.fill.strategies import (
    ChainFill,
    DictionaryFill,
    IdentityFill,
    LookupFill,
    PathDictionaryFill,
    PatternFill,
    TransformFill,
)
from locale_backfill.core.merge.errors import (
    BackfillError,
    FillFunctionError,
    InvalidDocumentRootError,
    TypeMismatchError,
)
from locale_backfill.core.merge.merger import KeyBackfillMerger, merge
from locale_backfill.core.merge.report import MergeReport

__all__ = [
    "BackfillError",
    "ChainFill",
    "DictionaryFill",
    "FillFunctionError",
    "IdentityFill",
    "InvalidDocumentRootError",
    "KeyBackfillMerger",
    "LookupFill",
    "MergeReport",
    "PathDictionaryFill",
    "PatternFill",
    "TransformFill",
    "TypeMismatchError",
    "merge",
]
