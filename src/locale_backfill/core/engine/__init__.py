"""
Engine do Locale Backfill.

Planeja (DAG determinístico) e executa os Steps de uma run de backfill,
consolidando o StepResult de cada um em um RunResult.

Componentes principais:
    - planner → ordenação topológica determinística e validações estruturais
    - engine  → execução coordenada com políticas de skip e fail-fast
"""
