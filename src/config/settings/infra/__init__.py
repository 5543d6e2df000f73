"""Settings de infraestrutura: barramento de eventos (Pub/Sub)."""

from __future__ import annotations

from config.settings.infra.pubsub import EventBusBackend, PubSubSettings, get_pubsub_settings

__all__ = ["EventBusBackend", "PubSubSettings", "get_pubsub_settings"]
