import datetime

from sqlalchemy import Date, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.core.db.base import Base


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    category: Mapped[str] = mapped_column(String(255))

    # asdecimal=False: the driver hands back floats, which JSON can carry
    amount: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False))

    date: Mapped[datetime.date] = mapped_column(Date)

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, category='{self.category}', amount={self.amount})>"
