"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from babyland.domain.model.customer import Customer
from babyland.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: int) -> Customer | None:
        for raw in self._load_raw():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def save(self, customer: Customer) -> None:
        records = self._load_raw()

        if customer.id is None:
            customer.id = max((r["id"] for r in records), default=0) + 1

        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == customer.id:
                records[i] = self._to_raw(customer)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(customer))

        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "phone": customer.phone,
            "email": customer.email,
            "location": customer.location,
            "store_name": customer.store_name,
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw["name"],
            phone=raw["phone"],
            location=raw["location"],
            email=raw.get("email"),
            store_name=raw.get("store_name"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
