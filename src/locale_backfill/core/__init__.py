"""
Core do Locale Backfill.

Reúne o algoritmo de backfill e a infraestrutura que o executa:
    - core.document → predicados e caminhos sobre Documents
    - core.merge    → KeyBackfillMerger (merge idempotente, no-clobber)
    - core.fill     → estratégias plugáveis de preenchimento
    - core.config   → carregamento, merge e hashing de configuração
    - core.pipeline → RunContext, protocolo Step, registry e tipos
    - core.engine   → planejamento (DAG) e execução de Steps

O core não lê nem escreve arquivos de locale diretamente (ver `store`).
"""
