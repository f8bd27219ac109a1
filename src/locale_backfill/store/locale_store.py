"""
LocaleStore — leitura e escrita de arquivos de locale JSON.

Cada idioma vive em `<directory>/<locale>.json`. A leitura carrega o
arquivo inteiro como Document; a escrita sobrescreve o arquivo inteiro,
no formato:

    json.dumps(document, ensure_ascii=False, indent=2) + "\\n"

A escrita passa por um arquivo temporário no mesmo diretório, movido
para o destino ao final: ou o arquivo novo está completo, ou o antigo
permanece.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from locale_backfill.core.document.predicates import is_plain_object
from locale_backfill.core.merge.errors import InvalidDocumentRootError

from .errors import LocaleDecodeError, LocaleNotFoundError, LocalePersistenceError


def dumps_locale(document: Mapping[str, Any]) -> str:
    return json.dumps(document, ensure_ascii=False, indent=2) + "\n"


class LocaleStore:
    """Acesso a um diretório de arquivos `<locale>.json`."""

    suffix = ".json"

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, locale: str) -> Path:
        if not isinstance(locale, str) or not locale.strip() or "/" in locale or "\\" in locale:
            raise ValueError(f"código de locale inválido: {locale!r}")
        return self.directory / f"{locale}{self.suffix}"

    def exists(self, locale: str) -> bool:
        return self.path_for(locale).is_file()

    def list_locales(self) -> List[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{self.suffix}") if p.is_file())

    def load(self, locale: str) -> Dict[str, Any]:
        """
        Carrega um locale inteiro.

        Raises:
            LocaleNotFoundError: arquivo inexistente.
            LocaleDecodeError: conteúdo não é JSON válido.
            InvalidDocumentRootError: raiz do JSON não é objeto.
        """
        path = self.path_for(locale)
        if not path.is_file():
            raise LocaleNotFoundError(
                f"Locale '{locale}' não encontrado: {path}", locale=locale, path=str(path)
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise LocaleDecodeError(
                f"Locale '{locale}' com JSON inválido em {path} (linha {exc.lineno}, coluna {exc.colno}): {exc.msg}",
                locale=locale,
                path=str(path),
            ) from exc

        if not is_plain_object(data):
            raise InvalidDocumentRootError(
                f"Raiz de {path.name} deve ser objeto, recebido: {type(data).__name__}"
            )
        return data

    def load_or_empty(self, locale: str) -> Dict[str, Any]:
        """Como `load`, mas um locale ainda inexistente vira Document vazio."""
        if not self.exists(locale):
            return {}
        return self.load(locale)

    def save(self, locale: str, document: Mapping[str, Any]) -> Path:
        """
        Sobrescreve `<locale>.json` com o Document completo.

        Raises:
            InvalidDocumentRootError: se `document` não for objeto.
            LocalePersistenceError: se a serialização ou a escrita falharem.
        """
        if not is_plain_object(document):
            raise InvalidDocumentRootError(
                f"Document de '{locale}' deve ser objeto, recebido: {type(document).__name__}"
            )

        path = self.path_for(locale)
        try:
            content = dumps_locale(document)
        except (TypeError, ValueError) as exc:
            raise LocalePersistenceError(
                f"Document de '{locale}' não é serializável em JSON: {exc}",
                locale=locale,
                path=str(path),
            ) from exc

        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, prefix=f".{locale}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise LocalePersistenceError(
                f"Falha ao gravar locale '{locale}' em {path}: {exc}",
                locale=locale,
                path=str(path),
            ) from exc

        return path
