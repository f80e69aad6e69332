"""Shared fixtures for filtering tests."""

from __future__ import annotations

import pytest

from yummy_search_filtering import (
    AllowDenyConfig,
    InMemorySchemaProvider,
    RelationDescriptor,
    RelationKind,
)


@pytest.fixture
def schema() -> InMemorySchemaProvider:
    """Orders with one of each relation kind."""
    return InMemorySchemaProvider(
        {
            "orders": ["id", "status", "total", "secret", "customer_id"],
            "customers": ["id", "name", "email", "password"],
            "invoices": ["id", "number"],
            "order_items": ["id", "sku", "quantity"],
            "tags": ["id", "label"],
        },
        relations={
            "orders": [
                RelationDescriptor(RelationKind.BELONGS_TO, "Customers"),
                RelationDescriptor(RelationKind.HAS_MANY, "OrderItems"),
                RelationDescriptor(RelationKind.HAS_ONE, "Invoices"),
                RelationDescriptor(RelationKind.BELONGS_TO_MANY, "Tags"),
            ],
        },
    )


@pytest.fixture
def open_config() -> AllowDenyConfig:
    return AllowDenyConfig()
