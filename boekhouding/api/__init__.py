from boekhouding.api.errors import register_error_handlers
from boekhouding.api.sheets import router as sheets_router
from boekhouding.api.transactions import router as transactions_router

__all__ = ["register_error_handlers", "sheets_router", "transactions_router"]
