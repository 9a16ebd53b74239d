"""API: camada de borda HTTP.

Responsabilidades:
- Expor health check para a plataforma de hospedagem
- Expor estado do agendador de lembretes

Subpastas:
- routes/: endpoints HTTP (health)

NÃO PODE conter: regras de lembrete, acesso ao ledger, orquestração de ciclos.
"""
