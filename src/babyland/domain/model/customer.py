"""Customer entity: contact and delivery details captured at checkout."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from babyland.domain.exceptions import ValidationError


@dataclass
class Customer:
    """A shopper who submitted an order.

    A new row is written for every checkout; customers are not
    de-duplicated by phone or email.
    """

    id: int | None
    name: str
    phone: str
    location: str
    email: str | None = None
    store_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        phone: str,
        location: str,
        email: str | None = None,
        store_name: str | None = None,
    ) -> Customer:
        """Create a new customer, enforcing the required checkout fields."""
        for label, value in (
            ("Customer name", name),
            ("Phone number", phone),
            ("Delivery address", location),
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

        return Customer(
            id=None,
            name=name.strip(),
            phone=phone.strip(),
            location=location.strip(),
            email=_optional(email),
            store_name=_optional(store_name),
        )


def _optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()
