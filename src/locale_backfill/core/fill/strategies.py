# src/locale_backfill/core/fill/strategies.py
"""
Estratégias de preenchimento (FillFunction) do Locale Backfill.

Toda estratégia é um callable `(path, valor_reference) -> valor` e deve ser:
    - total: nunca levanta exceção para valores de Document válidos
    - pura: mesma entrada, mesma saída
    - conservadora: em caso de miss, devolve o valor original
      ("mantém o inglês por enquanto")

Estratégias disponíveis:
    - IdentityFill       → devolve o valor (detecção sem preenchimento)
    - DictionaryFill     → lookup exato por valor (texto inglês → tradução)
    - PathDictionaryFill → lookup por caminho de chave ("a.b.c" → tradução)
    - PatternFill        → lista ordenada de (regex, template), primeiro match vence
    - LookupFill         → mesmo caminho em um segundo Document (ex.: users/{id})
    - TransformFill      → conversor de valores (ex.: escala NTRP → LTR)
    - ChainFill          → tenta estratégias em ordem até uma alterar o valor
"""

from __future__ import annotations

import re
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Pattern,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

from locale_backfill.core.document.paths import flatten, get_path
from locale_backfill.core.document.predicates import deep_equals, is_plain_object


_MISSING = object()


@runtime_checkable
class FillStrategy(Protocol):
    """Contrato estrutural de uma FillFunction nomeada."""

    name: str

    def __call__(self, path: str, value: Any) -> Any:
        ...


class IdentityFill:
    """Devolve o valor do reference sem alteração (modo detecção)."""

    name = "identity"

    def __call__(self, path: str, value: Any) -> Any:
        return value


class DictionaryFill:
    """
    Lookup exato por valor: `dictionary[value]`, com fallback para o próprio
    valor quando a chave falta ou está mapeada para None.

    Apenas valores string participam do lookup; demais folhas (números,
    booleanos, listas, None) retornam inalteradas.
    """

    name = "dictionary"

    def __init__(self, dictionary: Mapping[str, Any]):
        self.dictionary: Dict[str, Any] = dict(dictionary)

    def __len__(self) -> int:
        return len(self.dictionary)

    def __call__(self, path: str, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        found = self.dictionary.get(value)
        return value if found is None else found


class PathDictionaryFill:
    """
    Lookup por caminho de chave.

    Aceita dicionários planos (`{"editProfile.gender.hint": "Opcional"}`)
    ou aninhados (`{"editProfile": {"gender": {"hint": "Opcional"}}}`);
    ambos são normalizados para a forma plana.
    """

    name = "paths"

    def __init__(self, translations: Mapping[str, Any]):
        self.translations: Dict[str, Any] = flatten(translations)

    def __len__(self) -> int:
        return len(self.translations)

    def __call__(self, path: str, value: Any) -> Any:
        found = self.translations.get(path)
        return value if found is None else found


PatternRule = Tuple[Union[str, Pattern[str]], str]


class PatternFill:
    """
    Tradução por padrões: lista ordenada de `(regex, template)`.

    A primeira regra cujo regex encontra o valor (`re.search`) vence; a
    substituição é `regex.sub(template, valor, count=1)`, com grupos no
    formato `\\1` ou `\\g<nome>`. Sem match, o valor é devolvido intacto.

    A ordem das regras é responsabilidade do chamador: regras específicas
    devem vir antes de regras genéricas. `shadowed_rules` ajuda a detectar
    regras que nunca disparam.
    """

    name = "patterns"

    def __init__(self, rules: Iterable[PatternRule]):
        self.rules: List[Tuple[Pattern[str], str]] = [
            (re.compile(pattern) if isinstance(pattern, str) else pattern, template)
            for pattern, template in rules
        ]
        for regex, template in self.rules:
            # template inválido (grupo inexistente, escape desconhecido) falha aqui, não no fill
            regex.sub(template, "")

    def __len__(self) -> int:
        return len(self.rules)

    def match_index(self, value: str) -> Optional[int]:
        for index, (regex, _template) in enumerate(self.rules):
            if regex.search(value):
                return index
        return None

    def __call__(self, path: str, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        index = self.match_index(value)
        if index is None:
            return value
        regex, template = self.rules[index]
        return regex.sub(template, value, count=1)

    def shadowed_rules(self, samples: Iterable[str]) -> List[int]:
        """
        Índices das regras que casam com algum sample mas nunca vencem.

        Diagnóstico apenas: as regras não são reordenadas.
        """
        matched: set = set()
        won: set = set()
        for sample in samples:
            if not isinstance(sample, str):
                continue
            hits = [i for i, (regex, _t) in enumerate(self.rules) if regex.search(sample)]
            if hits:
                won.add(hits[0])
                matched.update(hits)
        return sorted(matched - won)


class LookupFill:
    """
    Preenche a partir de um segundo Document, pelo mesmo caminho de chave.

    Análogo aos backfills de registros (ex.: coordenadas copiadas de
    `users/{id}`). `path_map` permite ler de um caminho diferente no source
    (`{"location.lat": "coords.latitude"}`).
    """

    name = "lookup"

    def __init__(self, source: Mapping[str, Any], path_map: Optional[Mapping[str, str]] = None):
        self.source = source
        self.path_map: Dict[str, str] = dict(path_map or {})

    def __call__(self, path: str, value: Any) -> Any:
        found = get_path(self.source, self.path_map.get(path, path), _MISSING)
        if found is _MISSING or is_plain_object(found):
            return value
        return found


class TransformFill:
    """
    Aplica um conversor às folhas, opcionalmente restrito a alguns caminhos.

    Args:
        converter: função `valor -> valor`.
        paths: caminhos aos quais o conversor se aplica (None = todos).
    """

    name = "transform"

    def __init__(self, converter: Callable[[Any], Any], paths: Optional[Iterable[str]] = None):
        self.converter = converter
        self.paths = None if paths is None else frozenset(paths)

    def __call__(self, path: str, value: Any) -> Any:
        if self.paths is not None and path not in self.paths:
            return value
        return self.converter(value)


class ChainFill:
    """Tenta cada estratégia em ordem; a primeira que altera o valor vence."""

    name = "chain"

    def __init__(self, strategies: Sequence[Callable[[str, Any], Any]]):
        self.strategies = list(strategies)

    def __call__(self, path: str, value: Any) -> Any:
        for strategy in self.strategies:
            candidate = strategy(path, value)
            if not deep_equals(candidate, value):
                return candidate
        return value


def ntrp_to_ltr(ntrp: Any) -> Optional[int]:
    """
    Converte um nível NTRP (1.0–5.5) para a escala LTR (1–10).

    Strings numéricas são aceitas; valores não numéricos caem no nível
    médio (5) e `None` permanece `None`.
    """
    if ntrp is None:
        return None
    if isinstance(ntrp, bool):
        return 5
    try:
        numeric = float(ntrp)
    except (TypeError, ValueError):
        return 5
    if numeric != numeric:  # NaN
        return 5

    thresholds = (1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0)
    for level, limit in enumerate(thresholds, start=1):
        if numeric <= limit:
            return level
    return 10
