"""Abstract repository for Customer records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from babyland.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None if not found."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a customer, assigning ``customer.id`` if it is new."""
