"""Unit tests for the Product aggregate."""

import pytest

from babyland.domain.exceptions import ValidationError
from babyland.domain.model.product import Product, qr_payload
from babyland.domain.model.value_objects import Money


def _product() -> Product:
    return Product(id="1", code="BL-001", name="Onesie", price=Money.of("15.00"))


class TestProduct:

    def test_update_price(self):
        p = _product()
        p.update_price(Money.of("0"))
        assert p.price == Money.zero()

    def test_rename(self):
        p = _product()
        p.rename("  Sleepsuit ")
        assert p.name == "Sleepsuit"

    def test_rename_to_blank_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _product().rename(" ")

    def test_qr_payload_is_the_code(self):
        assert qr_payload(" BL-001 ") == "BL-001"
