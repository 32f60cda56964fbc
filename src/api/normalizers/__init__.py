"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- attentive/: respostas da API Attentive e eventos de webhook
"""

__all__: list[str] = []
