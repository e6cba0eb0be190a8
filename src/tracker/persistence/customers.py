"""Customer collection persistence."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Sequence

from pydantic import ValidationError

from ..config import settings
from ..models.domain import Customer, CustomerCollection, Visit, coerce_date
from ..schemas.customers import CustomerCollectionAdapter, CustomerRecord, VisitRecord
from .storage import KeyValueStore, StorageError


@dataclass(slots=True)
class PersistenceStatus:
    ok: bool
    error: Optional[str] = None


def customers_to_json(customers: Sequence[Customer]) -> str:
    """Serialize customers into the stored JSON array format."""
    records = [
        CustomerRecord(
            id=customer.id,
            name=customer.name,
            location=customer.location,
            visits=[VisitRecord(date=visit.date, count=visit.count) for visit in customer.visits],
            createdAt=customer.created_at,
        )
        for customer in customers
    ]
    return CustomerCollectionAdapter.dump_json(records).decode("utf-8")


def customers_from_json(payload: str) -> CustomerCollection:
    """Parse the stored JSON array into domain customers.

    Raises:
        ValidationError: payload is not JSON or not a customer collection
    """
    records = CustomerCollectionAdapter.validate_json(payload)
    return [
        Customer(
            id=record.id,
            name=record.name,
            location=record.location,
            created_at=record.createdAt,
            visits=[Visit(date=visit.date, count=visit.count) for visit in record.visits],
        )
        for record in records
    ]


class CustomerStore:
    """Owns the customer collection and keeps storage in step with it.

    Every mutation rewrites the whole collection before returning. Storage
    failures are logged and reported through ``PersistenceStatus``; the
    in-memory collection stays authoritative either way.
    """

    def __init__(self, storage: KeyValueStore, *, key: str | None = None) -> None:
        self.storage = storage
        self.key = key or settings.customers_key
        self.customers: CustomerCollection = []
        self.last_status = PersistenceStatus(ok=True)
        self._last_id = 0

    def load(self) -> CustomerCollection:
        try:
            payload = self.storage.get_item(self.key)
        except StorageError as exc:
            logging.error(f"Error loading customers: {exc}")
            payload = None

        customers: CustomerCollection = []
        if payload:
            try:
                customers = customers_from_json(payload)
            except ValidationError as exc:
                logging.error(f"Error loading customers from '{self.key}': {exc}")
                customers = []

        self.customers = customers
        return list(self.customers)

    def save(self, customers: Sequence[Customer] | None = None) -> PersistenceStatus:
        collection = self.customers if customers is None else customers
        try:
            self.storage.set_item(self.key, customers_to_json(collection))
        except StorageError as exc:
            logging.error(f"Error saving customers: {exc}")
            self.last_status = PersistenceStatus(ok=False, error=str(exc))
        else:
            self.last_status = PersistenceStatus(ok=True)
        return self.last_status

    def clear(self) -> None:
        self.customers = []

    def get_customer(self, customer_id: str) -> Customer | None:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    def add_customer(self, name: str, location: str, *, now: datetime | None = None) -> Customer:
        customer = Customer(
            id=self._next_id(),
            name=name.strip(),
            location=location.strip(),
            created_at=now or datetime.now(timezone.utc),
            visits=[],
        )
        self.customers.append(customer)
        self.save()
        return customer

    def add_visit(self, customer_id: str, today: date | str | None = None) -> Customer | None:
        """Record one visit for ``today`` and return the updated customer.

        Unknown ids are ignored and return ``None``.
        """
        customer = self.get_customer(customer_id)
        if customer is None:
            logging.warning(f"Customer {customer_id} not found, visit not recorded")
            return None

        day = coerce_date(today)
        existing = customer.visit_on(day)
        if existing is not None:
            existing.count += 1
        else:
            customer.visits.append(Visit(date=day, count=1))

        self.save()
        return customer

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped past anything already issued or stored.
        candidate = max(int(time.time() * 1000), self._last_id + 1)
        existing = {customer.id for customer in self.customers}
        for customer_id in existing:
            if customer_id.isascii() and customer_id.isdigit():
                candidate = max(candidate, int(customer_id) + 1)
        while str(candidate) in existing:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

