"""Connector de mensagens de telemetria (parse do corpo HTTP)."""

from api.connectors.messages.receive import InvalidJsonError, parse_message_body

__all__ = ["InvalidJsonError", "parse_message_body"]
