"""Validators: validação de entradas antes de montar requisições.

Estrutura:
- attentive/: telefone E.164, identificadores de assinante e limites
"""

__all__: list[str] = []
