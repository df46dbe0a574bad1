from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from fintrack.display.client import ExpensesApiClient
from fintrack.display.service import ExpenseTableService

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter(tags=["display"])


def get_table_service(request: Request) -> ExpenseTableService:
    api_client = ExpensesApiClient(
        request.app.state.http_client, request.app.state.config.api_base_url
    )
    return ExpenseTableService(api_client)


TableServiceDep = Annotated[ExpenseTableService, Depends(get_table_service)]


@router.get("/", response_class=HTMLResponse)
async def expenses_page(request: Request, table_service: TableServiceDep):
    """Render the expenses table; fetches from the API once per page load"""
    expenses = await table_service.load_expenses()
    return templates.TemplateResponse(
        request, "expenses.html", {"expenses": expenses}
    )
