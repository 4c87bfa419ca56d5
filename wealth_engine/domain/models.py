"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional


class PositionCategory(str, Enum):
    """Fixed-income instrument kinds"""

    CDB = "CDB"
    LCI = "LCI"
    LCA = "LCA"
    TESOURO = "Tesouro"
    CAIXINHA = "Caixinha"
    POUPANCA = "Poupanca"

    @property
    def default_exemption(self) -> bool:
        """LCI/LCA are exempt from income tax"""
        return self in (PositionCategory.LCI, PositionCategory.LCA)


class GoalCategory(str, Enum):
    EMERGENCY = "emergency"
    TRAVEL = "travel"
    PROPERTY = "property"
    RETIREMENT = "retirement"
    EDUCATION = "education"
    CAR = "car"
    OTHER = "other"


@dataclass(frozen=True)
class Position:
    """Single fixed-income holding"""

    position_id: str
    name: str
    category: PositionCategory
    principal: float
    rate_multiplier_percent: float  # 100 = 100% of the reference rate
    deposit_date: date
    maturity_date: Optional[date] = None
    tax_exempt: bool = False


@dataclass(frozen=True)
class Obligation:
    """Installment-based recurring expense"""

    obligation_id: str
    description: str
    total_amount: float
    installments: int
    current_installment: int
    start_date: date
    category: str = "other"
    paid: bool = False
    payment_date: Optional[date] = None  # deferred payment date, if any

    @property
    def monthly_amount(self) -> float:
        return self.total_amount / self.installments

    def with_paid(self, paid: bool) -> "Obligation":
        return replace(self, paid=paid)


@dataclass(frozen=True)
class FinancialGoal:
    """Savings target tracked against a current amount"""

    goal_id: str
    name: str
    target_amount: float
    current_amount: float
    category: GoalCategory
    created_at: date
    deadline: Optional[date] = None
    completed: bool = False
    completed_at: Optional[date] = None


@dataclass
class YieldBreakdown:
    """Output of a single position valuation"""

    gross_value: float
    gross_return: float
    iof_amount: float
    iof_rate: float
    ir_amount: float
    ir_rate: float
    net_value: float
    net_return: float
    effective_annual_rate: float  # percent
    calendar_days: int
    business_days: int


@dataclass
class ProjectionPoint:
    """One month of a wealth projection"""

    month: str  # YYYY-MM
    date: date
    net_worth: float
    monthly_expenses: float
    monthly_return: float
    positions_value: float
    contributions_value: float
    cumulative_expenses: float


@dataclass
class GoalProgress:
    """Progress figures for a single goal"""

    goal_id: str
    progress_percent: float
    remaining_amount: float
    days_until_deadline: Optional[int]
    completed: bool


@dataclass
class PortfolioSummary:
    """Dashboard totals at a valuation date"""

    total_invested: float
    total_net_return: float
    current_value: float
    total_pending_expenses: float
    monthly_commitment: float
    active_goals: int
