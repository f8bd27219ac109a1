# src/locale_backfill/core/config/__init__.py

"""
Camada de configuração do Locale Backfill.

Este pacote carrega, mescla e identifica a configuração de um job de
backfill (locales envolvidos, estratégias de preenchimento, dry-run,
relatório e habilitação de Steps).

Responsabilidades do pacote:
    - Carregamento de arquivos YAML/JSON (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Hash canônico de configuração e de Documents

Limites explícitos:
    - Não executa o backfill
    - Não lê nem escreve arquivos de locale
"""
