from enum import Enum


class SystemCategoryKey(str, Enum):
    INVESTMENT = "investment"
