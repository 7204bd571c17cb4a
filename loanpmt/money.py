"""Conversion between currency amounts and whole cents."""


def to_cents(value: float) -> int:
    """Convert an amount to cents, truncating toward zero."""
    return int(value * 100)


def from_cents(cents: int) -> float:
    """Convert cents back to an amount."""
    return cents / 100