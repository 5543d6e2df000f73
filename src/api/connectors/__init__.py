"""Connectors: adapters de borda para requests externos.

Estrutura:
- messages/: parse do corpo de POST /messages
"""

__all__: list[str] = []
