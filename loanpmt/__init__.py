"""Loan payment (PMT) calculation in whole cents, with a request handler and a SQLite history store."""

__version__ = "0.1.0"
__all__ = ["money", "service", "store", "repository", "handler"]