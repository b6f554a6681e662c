"""Domain models and types for pfm.

This package contains the functional core:
- Ledger and budget entities with their invariants
- Pure calculator and report functions
- No I/O operations
- Business logic separated from the CLI
"""

from pfm.domain.models import (
    AccountNumber,
    AccountType,
    CategoryName,
    Checking,
    Description,
    Investment,
    Money,
    Savings,
    Transaction,
    TransactionType,
)

__all__ = [
    "AccountNumber",
    "AccountType",
    "CategoryName",
    "Checking",
    "Description",
    "Investment",
    "Money",
    "Savings",
    "Transaction",
    "TransactionType",
]
