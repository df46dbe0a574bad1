import datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from fintrack.core.db import Base, Database
from fintrack.modules.expenses.models import Expense


SCENARIO_ROWS = [
    {"id": 1, "category": "Food", "amount": 12.50, "date": datetime.date(2024, 1, 5)},
    {"id": 2, "category": "Rent", "amount": 900.00, "date": datetime.date(2024, 1, 1)},
]

SCENARIO_JSON = [
    {"id": 1, "category": "Food", "amount": 12.5, "date": "2024-01-05"},
    {"id": 2, "category": "Rent", "amount": 900, "date": "2024-01-01"},
]


def create_schema(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    engine.dispose()


def seed(db_path, rows):
    """Insert rows out-of-band, the way the real table gets populated"""
    engine = create_engine(f"sqlite:///{db_path}")
    with Session(engine) as session:
        session.add_all(Expense(**row) for row in rows)
        session.commit()
    engine.dispose()


def make_database(db_path) -> Database:
    return Database(f"sqlite+aiosqlite:///{db_path}", {"poolclass": NullPool})
