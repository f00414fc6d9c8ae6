"""Transaction type and category vocabularies."""

from dataclasses import dataclass
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a ledger entry; amounts are always stored positive."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    DEBT = "DEBT"
    REPAYMENT = "REPAYMENT"


class Category(str, Enum):
    """Known transaction categories.

    Values are the display labels persisted by the household app, so rows
    written by older clients map back onto members without translation.
    """

    FOOD = "餐饮美食"
    TRANSPORT = "交通出行"
    SHOPPING = "网购消费"
    HOUSING = "居住物业"
    ENTERTAINMENT = "休闲娱乐"
    HEALTH = "医疗健康"
    SALARY = "工资薪水"
    INVESTMENT = "理财投资"
    RED_PACKET = "人情红包"
    CREDIT_CARD = "信用卡"
    MORTGAGE = "房贷"
    CAR_LOAN = "车贷"
    STUDENT_LOAN = "助学贷款"
    PERSONAL_LOAN = "消费贷"
    COLLATERAL_LOAN = "抵押贷款"
    INSTALLMENT = "分期付款"
    BORROWING = "借款"
    BABY = "宝宝综合"
    EDUCATION = "教育培训"
    DAILY = "日用百货"
    ALLOWANCE = "零花钱"
    TOYS = "玩具绘本"
    OTHER = "其他杂项"

    @property
    def label(self) -> str:
        """Return the display label."""
        return self.value


@dataclass(frozen=True)
class UnrecognizedCategory:
    """Category text that does not match any known category.

    Attributes:
        raw: Original value as supplied by the user or the AI parser.
    """

    raw: str

    @property
    def value(self) -> str:
        """Return the raw text so callers can treat both variants alike."""
        return self.raw

    @property
    def label(self) -> str:
        """Return the raw text as display label."""
        return self.raw


TransactionCategory = Category | UnrecognizedCategory


__all__ = [
    "TransactionType",
    "Category",
    "UnrecognizedCategory",
    "TransactionCategory",
]
