import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.core.exceptions import DatabaseError
from fintrack.modules.expenses.dto import ExpenseResponse
from fintrack.modules.expenses.models import Expense

logger = logging.getLogger(__name__)


class ExpensesService:
    def __init__(self):
        self.logger = logger

    async def get_expenses(self, db: AsyncSession) -> list[ExpenseResponse]:
        """Read every row of the expenses table, unordered and unfiltered."""
        query = select(Expense)
        self.logger.debug(f"Executing query: {query}")

        try:
            result = await db.execute(query)
            expenses = result.scalars().all()
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expenses read: {str(e)}")
            raise DatabaseError() from e

        self.logger.debug(f"Fetched {len(expenses)} expenses")
        return [ExpenseResponse.model_validate(expense) for expense in expenses]
