"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests de ingestão
- Parse de JSON e validação de shape das mensagens
- Mapear erros do core para respostas HTTP

Subpastas:
- connectors/: parse do corpo dos requests
- validators/: decoder de mensagens (união discriminada)
- routes/: endpoints HTTP (ingestão, health)

NÃO PODE conter: regras de dedupe, publicação de eventos, wiring.
"""
