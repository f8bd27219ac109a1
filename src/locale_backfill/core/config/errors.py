# src/locale_backfill/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Locale Backfill.

Cobrem o carregamento de arquivos de configuração do job e das fontes
de preenchimento (dicionários e listas de padrões), além dos conflitos
estruturais do deep-merge defaults + local.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha do merge de backfill em si
"""


class ConfigError(Exception):
    """Exceção base para erros de configuração do Locale Backfill."""


class ConfigFileNotFoundError(ConfigError):
    """
    Arquivo obrigatório (defaults do job ou fonte de preenchimento) não encontrado.

    Limites explícitos:
        - Não tenta criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge defaults + local.

    Exemplo de conflito:
        - defaults: {"locales": {"targets": ["fr"]}}
        - local:    {"locales": "fr"}
    """


class InvalidConfigValueError(ConfigError):
    """Valor de configuração com tipo ou formato inválido (ex.: regra de padrão sem template)."""
