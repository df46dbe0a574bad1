"""
Simple exception classes for the application.
"""

from fastapi import HTTPException, status


class DatabaseError(HTTPException):
    """Raised when database operations fail."""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message
        )


class ExpensesApiError(Exception):
    """Raised by the display client when the expenses API call fails."""

    def __init__(self, message: str):
        super().__init__(f"Expenses API error: {message}")
        self.message = message
