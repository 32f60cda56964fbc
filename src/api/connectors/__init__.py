"""Connectors: adapters de borda para APIs externas.

Estrutura:
- attentive/: API REST da Attentive (HTTP client, erros, webhook)
"""

__all__: list[str] = []
