"""The spreadsheet PMT function, worked in whole cents."""

import math


class PMTError(Exception):
    """Base class of payment errors."""


class ZeroNumPaymentsError(PMTError, ValueError):
    def __init__(self, message: str = "number of payments must not be 0") -> None:
        super().__init__(message)


class InternalError(PMTError):
    def __init__(self, message: str = "something went wrong") -> None:
        super().__init__(message)


class Service:
    """Calculates loan payments in whole cents."""

    def calc_pmt(self, loan_amount_cents: int, interest_rate: float, num_payments: int) -> int:
        """Return the payment per period, in cents, for a loan given in cents."""
        if num_payments == 0:
            raise ZeroNumPaymentsError()
        if interest_rate == 0:
            quotient = abs(loan_amount_cents) // abs(num_payments)
            same_sign = (loan_amount_cents < 0) == (num_payments < 0)
            return quotient if same_sign else -quotient

        rate = interest_rate
        payment = rate * loan_amount_cents / (1 - math.pow(1 + rate, -float(num_payments)))
        # Round half away from zero.
        return int(math.copysign(math.floor(abs(payment) + 0.5), payment))