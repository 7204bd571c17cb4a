"""A store for payment calculations kept in SQLite."""

from __future__ import annotations

import logging
import sqlite3
import uuid
from datetime import datetime, timezone

from .service import PMTError
from .store import PMTHistory

logger = logging.getLogger(__name__)

_MIGRATIONS = (
    """CREATE TABLE IF NOT EXISTS pmt_histories (
        id TEXT PRIMARY KEY,
        loan_amount_cents INTEGER NOT NULL,
        interest_rate REAL NOT NULL,
        num_payments INTEGER NOT NULL,
        pmt_cents INTEGER NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )""",
)

_COLUMNS = "id, loan_amount_cents, interest_rate, num_payments, pmt_cents, created_at, updated_at"


class SQLiteRepository:
    """Keeps a history of payment calculations."""

    def __init__(self, connection: sqlite3.Connection | None) -> None:
        self.connection = connection

    def __enter__(self) -> SQLiteRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _conn(self) -> sqlite3.Connection:
        if self.connection is None:
            raise PMTError("repository connection is closed")
        return self.connection

    def run_migrations(self) -> None:
        """Apply the migrations not yet applied; errors are logged."""
        connection = self._conn()
        (applied,) = connection.execute("PRAGMA user_version").fetchone()
        for version, statement in enumerate(_MIGRATIONS[applied:], start=applied + 1):
            try:
                with connection:
                    connection.execute(statement)
                    connection.execute(f"PRAGMA user_version = {version:d}")
            except sqlite3.Error:
                logger.exception("error running migrations")
                return

    def create(
        self, loan_amount_cents: int, interest_rate: float, num_payments: int, pmt_cents: int
    ) -> PMTHistory:
        """Store a calculation and return the stored record."""
        connection = self._conn()
        record_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc).isoformat()
        try:
            with connection:
                connection.execute(
                    f"INSERT INTO pmt_histories({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (record_id, loan_amount_cents, interest_rate, num_payments, pmt_cents, now, now),
                )
            row = connection.execute(
                f"SELECT {_COLUMNS} FROM pmt_histories WHERE id = ?", (record_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise PMTError(f"error creating pmt history: {exc}") from exc
        rid, loan, rate, payments, pmt, created, updated = row
        return PMTHistory(
            id=uuid.UUID(rid),
            loan_amount_cents=int(loan),
            interest_rate=float(rate),
            num_payments=int(payments),
            pmt_cents=int(pmt),
            created_at=datetime.fromisoformat(created),
            updated_at=datetime.fromisoformat(updated),
        )

    def close(self) -> None:
        """Close the connection, if there is one."""
        if self.connection is None:
            logger.warning("sqlite close conn: connection is None")
            return
        self.connection.close()
        self.connection = None