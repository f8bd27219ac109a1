"""Helpers compartilhados pelos Steps de backfill (leitura de config e caminhos)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from locale_backfill.core.errors import exception_to_payload
from locale_backfill.core.pipeline.context import RunContext
from locale_backfill.store.locale_store import LocaleStore


def get_step_cfg(ctx: RunContext, step_id: str) -> Dict[str, Any]:
    steps_cfg = ctx.section("steps")
    step_cfg = steps_cfg.get(step_id) or {}
    return step_cfg if isinstance(step_cfg, dict) else {}


def base_dir(ctx: RunContext) -> Path:
    return Path(ctx.meta.get("base_dir", "."))


def locale_store(ctx: RunContext) -> LocaleStore:
    directory = ctx.section("locales").get("directory", "locales")
    if not isinstance(directory, str) or not directory.strip():
        raise ValueError("locales.directory must be a non-empty string")
    return LocaleStore(base_dir(ctx) / directory)


def reference_locale(ctx: RunContext) -> str:
    reference = ctx.section("locales").get("reference", "en")
    if not isinstance(reference, str) or not reference.strip():
        raise ValueError("locales.reference must be a non-empty string")
    return reference


def target_locales(ctx: RunContext, store: LocaleStore) -> List[str]:
    """Targets declarados, ou todos os locales do diretório exceto o reference."""
    reference = reference_locale(ctx)
    targets = ctx.section("locales").get("targets")
    if targets is None:
        return [loc for loc in store.list_locales() if loc != reference]
    if not isinstance(targets, list) or not all(isinstance(t, str) and t.strip() for t in targets):
        raise ValueError("locales.targets must be a list of locale codes")
    if reference in targets:
        raise ValueError(f"reference locale '{reference}' cannot also be a target")
    seen: List[str] = []
    for t in targets:
        if t not in seen:
            seen.append(t)
    return seen


def failed_result_payload(exc: Exception) -> Dict[str, Any]:
    return {"error": exception_to_payload(exc).to_dict()}
