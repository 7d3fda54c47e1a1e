"""Fixed-rate monthly installment calculator."""

__version__ = "0.1.0"
