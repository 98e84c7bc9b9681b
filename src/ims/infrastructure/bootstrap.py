"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ims.application.controller import Alert, Confirm, InventoryController
from ims.infrastructure.config import Settings
from ims.infrastructure.http.http_product_repository import HttpProductRepository
from ims.infrastructure.persistence.json_preference_store import (
    JsonPreferenceStore,
)


def product_repository(settings: Settings) -> HttpProductRepository:
    return HttpProductRepository(settings.api_url, timeout=settings.request_timeout)


def preference_store(settings: Settings) -> JsonPreferenceStore:
    return JsonPreferenceStore(settings.preferences_file)


def inventory_controller(
    settings: Settings,
    alert: Alert,
    confirm: Confirm,
) -> InventoryController:
    return InventoryController(
        product_repo=product_repository(settings),
        preferences=preference_store(settings),
        alert=alert,
        confirm=confirm,
    )
