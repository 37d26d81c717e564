"""Settlement: expenses, netting and the round settlement pipeline."""

from .expenses import Expense, expense_balances, expense_payables  # noqa: F401
from .netting import net, net_balances  # noqa: F401
from .pipeline import RoundSettlement, settle_round  # noqa: F401
