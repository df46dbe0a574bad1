import logging
from typing import Any

from fintrack.core.exceptions import ExpensesApiError
from fintrack.display.client import ExpensesApiClient

logger = logging.getLogger(__name__)


class ExpenseTableService:
    def __init__(self, api_client: ExpensesApiClient):
        self.api_client = api_client
        self.logger = logger

    async def load_expenses(self) -> list[dict[str, Any]]:
        """One fetch per call. Failures are logged and leave the table empty."""
        try:
            expenses = await self.api_client.fetch_expenses()
        except ExpensesApiError as e:
            self.logger.error(f"Failed to load expenses: {e.message}")
            return []

        self.logger.info(f"Loaded {len(expenses)} expenses")
        return expenses
