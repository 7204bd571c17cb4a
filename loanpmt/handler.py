"""Request handling for payment calculations: validate, calculate, record, reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .money import from_cents, to_cents
from .service import InternalError, Service, ZeroNumPaymentsError
from .store import Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PMTRequest:
    """A request for the payment on a loan."""

    loan_amount: float
    interest_rate: float
    num_payments: int


@dataclass(frozen=True)
class PMTResponse:
    """The payment per period, formatted with two decimal places."""

    pmt: str


class PMTHandler:
    """Answers payment requests and records every calculation in a store."""

    def __init__(self, service: Service, store: Store) -> None:
        self.service = service
        self.store = store

    def calculate_pmt(self, request: PMTRequest) -> PMTResponse:
        """Calculate the payment for a request, record it and return the response."""
        if request.num_payments == 0:
            raise ZeroNumPaymentsError()

        loan_amount_cents = to_cents(request.loan_amount)
        pmt_cents = self.service.calc_pmt(
            loan_amount_cents, request.interest_rate, request.num_payments
        )

        try:
            self.store.create(
                loan_amount_cents, request.interest_rate, request.num_payments, pmt_cents
            )
        except Exception as exc:
            logger.error("failed to store pmt history: %s", exc)
            raise InternalError() from exc

        return PMTResponse(pmt=f"{from_cents(pmt_cents):.2f}")