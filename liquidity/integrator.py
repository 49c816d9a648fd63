"""Integrator account endpoints: registration and webhook settings."""
from __future__ import annotations

from ._resource import ResourceClient
from .models import (
    IntegratorResponse,
    MessageResponse,
    RegisterIntegratorData,
    WebhookUpdate,
)

__all__ = ["IntegratorClient"]


class IntegratorClient(ResourceClient):
    def register(self, data: RegisterIntegratorData) -> IntegratorResponse:
        """Register a new integrator; the response carries its id."""
        return self.http.post("/integrator/v1/register", data, target=IntegratorResponse)

    def update_webhook(self, webhook_url: str) -> MessageResponse:
        return self.http.patch(
            "/integrator/v1/webhook", WebhookUpdate(webhook=webhook_url), target=MessageResponse
        )
