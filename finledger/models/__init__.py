from finledger.models.user import User
from finledger.models.category import Category
from finledger.models.transaction import Transaction
from finledger.models.investment import Investment
from finledger.models.goal import Goal

__all__ = ["User", "Category", "Transaction", "Investment", "Goal"]
