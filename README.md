# loanpmt

Calculates the periodic payment of a loan, the same figure the spreadsheet
`PMT` function gives. Money is handled as whole cents, so rounding errors have
fewer places to creep in. Each calculation can be recorded in a history store
kept in SQLite.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Converting money (`loanpmt.money`)

```python
from loanpmt.money import to_cents, from_cents

to_cents(23.42)    # 2342
from_cents(2342)   # 23.42
```

`to_cents` multiplies by 100 and truncates toward zero. `from_cents` divides
by 100.

## Calculating a payment (`loanpmt.service`)

```python
from loanpmt.service import Service, ZeroNumPaymentsError

service = Service()
service.calc_pmt(130025034, 0.3293, 24)   # 42863496 cents
service.calc_pmt(1000, 0.25, 2)           # 694 cents
service.calc_pmt(1000, 0, 3)              # 333 cents

try:
    service.calc_pmt(1000, 0.1, 0)
except ZeroNumPaymentsError:
    ...
```

- The loan amount is given in cents and the result is in cents.
- The interest rate is per period, for example `0.05` for 5%.
- With a non-zero rate the payment is rounded to the nearest cent, halves
  away from zero.
- With a zero rate the loan is divided by the number of payments and the
  result truncated toward zero, so any remainder is not spread out
  (`calc_pmt(10, 0, 3)` gives `3`).
- Zero payments raises `ZeroNumPaymentsError`.

The errors are:

- `PMTError`, the base class of the package's errors.
- `ZeroNumPaymentsError`, a subclass of both `PMTError` and `ValueError`.
- `InternalError`, a subclass of `PMTError`.

## Handling requests (`loanpmt.handler`)

`PMTHandler(service, store)` takes a `PMTRequest` with these fields:

- `loan_amount`, in currency units
- `interest_rate`
- `num_payments`

It converts the loan to cents and calculates the payment. It then records the
inputs and the result in the store. It returns a `PMTResponse` whose `pmt` is
the payment as a string with two decimals.

```python
import sqlite3

from loanpmt.handler import PMTHandler, PMTRequest
from loanpmt.repository import SQLiteRepository
from loanpmt.service import Service

with SQLiteRepository(sqlite3.connect(":memory:")) as repo:
    repo.run_migrations()
    handler = PMTHandler(Service(), repo)
    response = handler.calculate_pmt(
        PMTRequest(loan_amount=10_000_000, interest_rate=1.2, num_payments=3)
    )
    print(response.pmt)   # "13243781.09"
```

The handler raises in two cases:

- **Zero payments:** the request raises `ZeroNumPaymentsError` and nothing is
  recorded.
- **Store failure:** any exception from the store is logged and raised again
  as `InternalError`.

## The history store (`loanpmt.repository`)

`SQLiteRepository` wraps an open `sqlite3.Connection`.

- `run_migrations()` creates the `pmt_histories` table if it has not been
  created yet. It tracks the applied migrations in SQLite's `user_version`.
  If a migration fails, the error is logged and not raised.
- `create(loan_amount_cents, interest_rate, num_payments, pmt_cents)` inserts
  a row and returns it as a `PMTHistory`. The row gets a fresh UUID and UTC
  timestamps. A database error is raised as `PMTError`.
- `close()` closes the connection. Calling it again only logs a warning.
  Using a closed repository raises `PMTError`.
- The repository is also a context manager that closes on exit.

## Your own store (`loanpmt.store`)

Any object with a `create(loan_amount_cents, interest_rate, num_payments,
pmt_cents)` method that returns a `PMTHistory` can serve as the store. `Store`
is a runtime-checkable protocol that describes this interface.

`PMTHistory` is a frozen dataclass. Its fields are:

- `id`, a `uuid.UUID`
- `loan_amount_cents`
- `interest_rate`
- `num_payments`
- `pmt_cents`
- `created_at`
- `updated_at`

## What the package does not do

The package is a library only:

- It has no command-line program.
- It starts no network server; there is no gRPC or HTTP endpoint.
- It does not connect to a database server. History is kept only in SQLite
  or in a store you supply.

To serve requests over a network, call `PMTHandler.calculate_pmt` from a
server of your own.