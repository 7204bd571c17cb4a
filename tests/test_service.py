import pytest

from loanpmt.service import PMTError, Service, ZeroNumPaymentsError


@pytest.fixture
def service():
    return Service()


@pytest.mark.parametrize(
    ("loan_amount_cents", "interest_rate", "num_payments", "expected"),
    [
        (1000, 0.1, 1, 1100),
        (1000, 0.25, 2, 694),
        (123456, 0.05, 1, 129629),
        (130025034, 0.3293, 24, 42863496),
        (1000, 0, 1, 1000),
        (100000, 0, 10, 10000),
        (10, 0, 3, 3),
        (1000, 0, 3, 333),
        (999, 0, 3, 333),
    ],
)
def test_calc_pmt(service, loan_amount_cents, interest_rate, num_payments, expected):
    assert service.calc_pmt(loan_amount_cents, interest_rate, num_payments) == expected


def test_zero_num_payments_raises(service):
    with pytest.raises(ZeroNumPaymentsError) as info:
        service.calc_pmt(1000, 0.1, 0)
    assert str(info.value) == "number of payments must not be 0"


def test_zero_num_payments_is_pmt_error(service):
    with pytest.raises(PMTError):
        service.calc_pmt(1000, 0, 0)


def test_zero_interest_truncates_toward_zero(service):
    assert service.calc_pmt(-10, 0, 3) == -3