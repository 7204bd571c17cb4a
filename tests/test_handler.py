from unittest import mock

import pytest

from loanpmt.handler import PMTHandler, PMTRequest
from loanpmt.money import to_cents
from loanpmt.service import InternalError, Service, ZeroNumPaymentsError


def _handler(store):
    return PMTHandler(Service(), store)


def test_happy_path_returns_pmt_and_stores_record():
    store = mock.Mock()
    handler = _handler(store)

    response = handler.calculate_pmt(
        PMTRequest(loan_amount=10_000_000, interest_rate=1.2, num_payments=3)
    )

    assert response.pmt == "13243781.09"
    store.create.assert_called_once_with(to_cents(10_000_000), 1.2, 3, 1_324_378_109)


def test_zero_num_payments_raises_and_stores_nothing():
    store = mock.Mock()
    handler = _handler(store)

    with pytest.raises(ZeroNumPaymentsError):
        handler.calculate_pmt(
            PMTRequest(loan_amount=10_000_000, interest_rate=1.2, num_payments=0)
        )

    store.create.assert_not_called()


def test_store_error_raises_internal_error():
    store = mock.Mock()
    store.create.side_effect = RuntimeError("A db error occured")
    handler = _handler(store)

    with pytest.raises(InternalError) as info:
        handler.calculate_pmt(
            PMTRequest(loan_amount=10_000_000, interest_rate=1.2, num_payments=3)
        )

    assert str(info.value) == "something went wrong"
    store.create.assert_called_once_with(to_cents(10_000_000), 1.2, 3, 1_324_378_109)


def test_zero_interest_response_is_formatted_to_two_places():
    store = mock.Mock()
    handler = _handler(store)

    response = handler.calculate_pmt(
        PMTRequest(loan_amount=10, interest_rate=0, num_payments=1)
    )

    assert response.pmt == "10.00"
    store.create.assert_called_once_with(1000, 0, 1, 1000)