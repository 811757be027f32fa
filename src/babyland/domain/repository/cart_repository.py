"""Abstract repository for the shopper's cart snapshot.

There is exactly one cart per storage location, so the interface is
load/save rather than keyed lookups.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from babyland.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart | None:
        """Return the stored cart, or None if nothing was stored.

        Raises CartDataError if a snapshot exists but cannot be read.
        """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Overwrite the stored snapshot with *cart*."""
