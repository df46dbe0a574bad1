# Export base classes only to avoid circular imports
# Models should be imported from their respective modules, not from here

from fintrack.core.db.base import Base
from fintrack.core.db.engine import Database

__all__ = ["Base", "Database"]
