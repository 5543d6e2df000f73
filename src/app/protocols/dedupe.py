"""Protocolos de domínio para o ledger de dedupe.

Interfaces leves (ABCs) dependidas por Application.
A chave de idempotência é o par (channel, sequence).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

Sequence = int | float


class DedupeProtocol(ABC):
    """Contrato mínimo síncrono para o ledger de deduplicação.

    Método canônico:
    - seen(channel, sequence) -> bool
      Retorna True se o par já foi visto (duplicado). Se não visto, registra-o
      e retorna False. Verificação e registro formam uma única operação atômica.
    """

    @abstractmethod
    def seen(self, channel: str, sequence: Sequence) -> bool:
        """Verifica e registra o par de forma atômica.

        Args:
            channel: Canal da mensagem (escopo da dedupe)
            sequence: messageNumber dentro do canal

        Returns:
            True se já foi visto (duplicado); False se foi registrado agora (novo).
        """


class AsyncDedupeProtocol(ABC):
    """Contrato mínimo assíncrono para o ledger de deduplicação.

    Método canônico:
    - seen_async(channel, sequence) -> bool
      Mesma semântica atômica de `DedupeProtocol.seen`.
    """

    @abstractmethod
    async def seen_async(self, channel: str, sequence: Sequence) -> bool:
        """Verifica e registra o par de forma atômica (async).

        Returns:
            True se duplicado; False se registrado agora.
        """
