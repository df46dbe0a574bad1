import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Unique identifier for the expense")
    category: str = Field(..., description="Spending category")
    amount: float = Field(..., description="Amount of the expense")
    date: datetime.date = Field(..., description="Calendar date of the expense")

    @field_serializer("amount")
    def serialize_amount(self, amount: float) -> int | float:
        # 900.00 goes out as 900, 12.50 as 12.5
        return int(amount) if float(amount).is_integer() else amount
