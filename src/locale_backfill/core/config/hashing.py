# src/locale_backfill/core/config/hashing.py
"""
Hashing canônico de configuração e de Documents.

O hash representa a identidade estrutural do conteúdo e é usado para:
    - identificar a configuração efetiva de uma run
    - detectar targets que o merge não alterou (nenhuma escrita necessária)

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - UTF-8, sem escape ASCII
    - SHA-256 hexadecimal (64 caracteres)
"""

import hashlib
import json
from typing import Any, Dict


def _canonical_sha256(payload: Dict[str, Any], label: str) -> str:
    if not isinstance(payload, dict):
        raise TypeError(
            f"{label} para hashing deve ser dict, recebido: {type(payload).__name__}"
        )

    canonical_json = json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_config_hash(config: Dict[str, Any]) -> str:
    """Hash SHA-256 da configuração efetiva do job."""
    return _canonical_sha256(config, "Config")


def compute_document_hash(document: Dict[str, Any]) -> str:
    """
    Hash SHA-256 de um Document de locale.

    Documents com as mesmas chaves e valores produzem o mesmo hash,
    independentemente da ordem de inserção das chaves.
    """
    return _canonical_sha256(document, "Document")
