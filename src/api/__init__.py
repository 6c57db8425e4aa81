"""API — camada de borda com o backend HTTP.

Responsabilidades:
- Executar requisições com orçamento de tempo e cancelamento
- Traduzir status HTTP em outcomes tipados, por operação
- Expor clientes por recurso (User, Affiliation)

Subpastas:
- connectors/: adapters HTTP por backend

NÃO PODE conter: FSM, orquestração de startup, navegação.
"""
