# src/locale_backfill/core/merge/__init__.py

"""
Merge de backfill de chaves do Locale Backfill.

Este pacote contém o algoritmo central do projeto: a reconciliação
idempotente de um Document target contra o formato de chaves de um
Document reference.

Componentes:
    - merger → KeyBackfillMerger e o atalho funcional `merge`
    - report → MergeReport (contadores filled / unchanged / conflicts)
    - errors → TypeMismatchError, FillFunctionError, InvalidDocumentRootError

Princípios fundamentais:
    - O merge é puro (sem I/O, sem mutação de inputs)
    - Valores já customizados nunca são sobrescritos
    - Conflitos estruturais são recuperados localmente e registrados
"""
