"""Connectors — adapters de borda para APIs externas.

Estrutura:
- backend/: API REST própria (recursos User e Affiliation)
"""

__all__: list[str] = []
