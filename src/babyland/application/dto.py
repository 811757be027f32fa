"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerDetails:
    """Input: the contact and delivery fields of the checkout form."""

    name: str
    phone: str
    location: str
    email: str | None = None
    store_name: str | None = None


@dataclass(frozen=True)
class CustomerDTO:
    name: str
    phone: str
    location: str
    email: str | None
    store_name: str | None


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item as displayed to the user."""

    product_code: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user (the invoice)."""

    id: int
    status: str
    customer: CustomerDTO | None
    items: list[OrderItemDTO]
    total: str
    deposit: str | None
    balance_due: str
    created_at: str
    updated_at: str | None


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one row of the admin order list."""

    id: int
    customer_name: str
    status: str
    total: str
    created_at: str
