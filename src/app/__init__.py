"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: agendamento dos ciclos de polling
- use_cases/: ciclo de polling (fetch → avaliação → entrega)
- services/: classificador de datas, avaliador e montagem de lembretes
- domain/: modelos de evento, antecedência e pedido de lembrete
- infra/: implementações concretas de IO (Google Calendar, Slack, ledger)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
