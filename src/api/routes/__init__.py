"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (ingestão, health)
- Parse inicial do request
- Delegação para use_cases
- Mapeamento de erros para respostas HTTP

Estrutura:
- routes/messages/: POST /messages
- routes/health/: health checks e readiness
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
