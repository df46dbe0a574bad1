"""
Centralized dependency management
Singletons for stateless services, per-request for DB sessions
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.core.db.engine import get_db
from fintrack.modules.expenses.service import ExpensesService


@lru_cache()
def get_expense_service() -> ExpensesService:
    """
    Expense service - SINGLETON
    Takes DB session as method parameter, not in constructor
    """
    return ExpensesService()


# Database dependencies
DatabaseDep = Annotated[AsyncSession, Depends(get_db)]

# Service dependencies
ExpenseServiceDep = Annotated[ExpensesService, Depends(get_expense_service)]
