"""Session state layer - owns accounts and budgets for the running process.

This module re-exports the registries for easy importing. Nothing here is
persisted; state lives until the process exits.
"""

from pfm.store.accounts import FIRST_ACCOUNT_NUMBER, FinanceManager
from pfm.store.budgets import BudgetManager

__all__ = [
    "FIRST_ACCOUNT_NUMBER",
    "BudgetManager",
    "FinanceManager",
]
