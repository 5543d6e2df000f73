"""Núcleo do serviço: casos de uso, contratos e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (decode, dedupe, despacho)
- domain/: modelos de mensagem tipada
- constants/: enums e tabelas de variantes
- infra/: implementações concretas de IO (Redis, Pub/Sub, memória)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""

__version__ = "1.0.0"
