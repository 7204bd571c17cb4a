"""The stored record of a calculation and the interface that stores it."""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class PMTHistory:
    id: uuid.UUID
    loan_amount_cents: int
    interest_rate: float
    num_payments: int
    pmt_cents: int
    created_at: datetime
    updated_at: datetime


@runtime_checkable
class Store(Protocol):
    def create(
        self, loan_amount_cents: int, interest_rate: float, num_payments: int, pmt_cents: int
    ) -> PMTHistory:
        """Store a calculation and return the new record."""
        ...