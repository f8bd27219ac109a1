"""
Pipeline do Locale Backfill.

Protocolos e estruturas compartilhadas entre Steps e Engine:
    - context  → RunContext (artefatos, logs estruturados, warnings)
    - step     → protocolo Step
    - registry → StepRegistry (unicidade de ids)
    - types    → StepKind, StepStatus, StepResult
"""
