# src/locale_backfill/core/fill/loader.py
"""
Construção de estratégias de preenchimento a partir da configuração.

Cada locale alvo declara suas fontes em `backfill.fill.<locale>`:

    fill:
      fr:
        paths: dicts/fr.paths.json      # caminho de chave → tradução
        dictionary: dicts/fr.yaml       # texto do reference → tradução
        patterns: patterns/fr.yaml      # {"rules": [{pattern, template}, ...]}

Cada fonte pode ser um caminho de arquivo (YAML/JSON, relativo a
`base_dir`) ou o conteúdo inline. A ordem de consulta é fixa, do mais
específico ao mais genérico: paths → dictionary → patterns. Sem fontes,
a estratégia é a identidade (apenas detecção).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from locale_backfill.core.config.errors import InvalidConfigValueError
from locale_backfill.core.config.loader import load_mapping_file

from .strategies import (
    ChainFill,
    DictionaryFill,
    IdentityFill,
    PathDictionaryFill,
    PatternFill,
)


FillFunction = Callable[[str, Any], Any]


def _resolve_mapping(source: Any, base_dir: Path, key: str) -> Dict[str, Any]:
    if isinstance(source, dict):
        return source
    if isinstance(source, (str, Path)):
        return load_mapping_file(base_dir / source)
    raise InvalidConfigValueError(
        f"backfill.fill.*.{key} deve ser caminho de arquivo ou mapping, recebido: "
        f"{type(source).__name__}"
    )


def parse_pattern_rules(raw: Any) -> List[Tuple[str, str]]:
    """
    Normaliza regras de padrão para `[(pattern, template), ...]`.

    Formatos aceitos por regra:
        - {"pattern": "^(.+)\\?$", "template": "\\1 ?"}
        - ["^(.+)\\?$", "\\1 ?"]
    """
    if isinstance(raw, dict):
        raw = raw.get("rules", [])
    if not isinstance(raw, list):
        raise InvalidConfigValueError("regras de padrão devem ser uma lista")

    rules: List[Tuple[str, str]] = []
    for index, item in enumerate(raw):
        if isinstance(item, dict):
            pattern, template = item.get("pattern"), item.get("template")
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            pattern, template = item
        else:
            raise InvalidConfigValueError(f"regra de padrão #{index} inválida: {item!r}")

        if not isinstance(pattern, str) or not pattern:
            raise InvalidConfigValueError(f"regra de padrão #{index} sem 'pattern'")
        if not isinstance(template, str):
            raise InvalidConfigValueError(f"regra de padrão #{index} sem 'template'")
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise InvalidConfigValueError(f"regra de padrão #{index} com regex inválido: {exc}") from exc
        try:
            regex.sub(template, "")
        except (re.error, IndexError) as exc:
            raise InvalidConfigValueError(f"regra de padrão #{index} com template inválido: {exc}") from exc
        rules.append((pattern, template))
    return rules


def _resolve_patterns(source: Any, base_dir: Path) -> List[Tuple[str, str]]:
    if isinstance(source, (str, Path)):
        source = load_mapping_file(base_dir / source)
    return parse_pattern_rules(source)


def build_fill_strategy(
    fill_cfg: Optional[Mapping[str, Any]],
    *,
    base_dir: Union[str, Path] = ".",
) -> FillFunction:
    """
    Monta a FillFunction de um locale a partir da sua seção de configuração.

    Args:
        fill_cfg: seção `backfill.fill.<locale>` (None ou vazia → identidade).
        base_dir: diretório base para caminhos relativos.

    Returns:
        FillFunction: estratégia única ou ChainFill na ordem paths → dictionary → patterns.

    Raises:
        InvalidConfigValueError: se alguma fonte tiver formato inválido.
        ConfigFileNotFoundError: se um arquivo de fonte não existir.
    """
    if not fill_cfg:
        return IdentityFill()
    if not isinstance(fill_cfg, Mapping):
        raise InvalidConfigValueError("backfill.fill.<locale> deve ser um mapping")

    base = Path(base_dir)
    strategies: List[FillFunction] = []

    if fill_cfg.get("paths") is not None:
        strategies.append(PathDictionaryFill(_resolve_mapping(fill_cfg["paths"], base, "paths")))
    if fill_cfg.get("dictionary") is not None:
        strategies.append(DictionaryFill(_resolve_mapping(fill_cfg["dictionary"], base, "dictionary")))
    if fill_cfg.get("patterns") is not None:
        strategies.append(PatternFill(_resolve_patterns(fill_cfg["patterns"], base)))

    if not strategies:
        return IdentityFill()
    if len(strategies) == 1:
        return strategies[0]
    return ChainFill(strategies)
