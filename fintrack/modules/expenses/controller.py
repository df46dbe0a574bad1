from fastapi import APIRouter

from fintrack.core.dependencies import DatabaseDep, ExpenseServiceDep
from fintrack.modules.expenses.dto import ExpenseResponse

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=list[ExpenseResponse])
async def get_all_expenses(
    db: DatabaseDep,
    expenses_service: ExpenseServiceDep,
) -> list[ExpenseResponse]:
    """API endpoint to fetch every expense"""
    return await expenses_service.get_expenses(db)
