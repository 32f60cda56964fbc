"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- attentive/: bodies da API Attentive (poda, atributos, itens, timestamps)
"""

__all__: list[str] = []
