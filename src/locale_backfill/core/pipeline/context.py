# src/locale_backfill/core/pipeline/context.py
"""
Contexto de execução compartilhado de uma run de backfill.

O RunContext é o único meio permitido de:
    - troca indireta de informações entre Steps (Documents carregados,
      Documents mesclados, relatórios de merge)
    - registro de logs estruturados de execução
    - coleta de warnings não fatais associados a Steps

Invariantes:
    - Artefatos são indexados por chave explícita
    - Logs sempre incluem `run_id`, `step_id` e timestamp UTC
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa Steps
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


# Chaves canônicas do artifact store
REFERENCE_ARTIFACT_KEY = "locales.reference"
TARGETS_ARTIFACT_KEY = "locales.targets"
MERGED_ARTIFACT_KEY = "backfill.merged"
REPORTS_ARTIFACT_KEY = "backfill.reports"
AUDIT_ARTIFACT_KEY = "audit.untranslated"


@dataclass
class RunContext:
    """
    Contexto de execução de uma run de backfill.

    Campos canônicos:
        - run_id: identificador único da execução
        - created_at: timestamp UTC de criação do contexto
        - config: configuração efetiva (defaults + local deep-merge)
        - meta: metadados de execução (ex.: base_dir para caminhos relativos)
        - events: log estruturado de eventos
        - warnings: warnings por step_id
    """
    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        if key not in self._artifacts:
            raise KeyError(key)
        return self._artifacts[key]

    # -----------------------------
    # Config helpers
    # -----------------------------
    def section(self, name: str) -> Dict[str, Any]:
        """Seção de topo da config como dict (vazio quando ausente ou inválida)."""
        value = (self.config or {}).get(name)
        return value if isinstance(value, dict) else {}

    @property
    def dry_run(self) -> bool:
        return bool(self.section("backfill").get("dry_run", False))

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def events_for(self, step_id: str, level: Optional[str] = None) -> List[Dict[str, Any]]:
        return [
            e for e in self.events
            if e.get("step_id") == step_id and (level is None or e.get("level") == level)
        ]
