"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (ações, webhook, health)
- Validação inicial de request (headers, corpo)
- Delegação para connectors/coordinators
- Respostas HTTP apropriadas

Estrutura:
- routes/attentive/: ações e webhook da Attentive
- routes/health/: health check

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
