from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from fintrack.core.exceptions import ExpensesApiError
from fintrack.modules.expenses.dto import ExpenseResponse

_expense_list = TypeAdapter(list[ExpenseResponse])


class ExpensesApiClient:
    """Talks to the API service's /expenses endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.url = f"{base_url.rstrip('/')}/expenses"

    async def fetch_expenses(self) -> list[dict[str, Any]]:
        """
        Return the rows exactly as the API sent them. They are checked
        against ExpenseResponse, but the coerced copies are discarded so
        cells show the received values (900 stays 900).
        """
        try:
            response = await self.http_client.get(self.url)
        except httpx.RequestError as e:
            raise ExpensesApiError(f"request to {self.url} failed: {e!r}") from e

        if not response.is_success:
            raise ExpensesApiError(
                f"GET {self.url} returned {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ExpensesApiError(f"malformed response body: {e}") from e

        try:
            _expense_list.validate_python(payload)
        except ValidationError as e:
            raise ExpensesApiError(f"unexpected response shape: {e}") from e

        return payload
