from enum import Enum


class TransactionType(str, Enum):
    RECEIPT = "RECEIPT"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"
    GOALS = "GOALS"
    INVESTMENT = "INVESTMENT"  # deposit into an investment
    WITHDRAW = "WITHDRAW"  # withdrawal from an investment


INVESTMENT_MOVEMENT_TYPES = (TransactionType.INVESTMENT, TransactionType.WITHDRAW)


class InvestmentType(str, Enum):
    CDB = "CDB"
    LCI = "LCI"
    LCA = "LCA"
    TESOURO_DIRETO = "TESOURO_DIRETO"
    ACOES = "ACOES"
    FUNDOS = "FUNDOS"
    CRIPTOMOEDAS = "CRIPTOMOEDAS"
    PREVIDENCIA = "PREVIDENCIA"


class UserPlan(str, Enum):
    FREE = "FREE"
    BASIC = "BASIC"
    PRO = "PRO"


class GoalStatus(str, Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
