"""Validators por contrato de entrada.

Estrutura:
- rocket/: mensagens de telemetria de foguetes (envelope + variantes)
"""

__all__: list[str] = []
