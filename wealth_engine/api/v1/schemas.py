"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from datetime import date
from typing import Dict, List, Optional

from wealth_engine.domain.models import (
    FinancialGoal,
    GoalCategory,
    Obligation,
    Position,
    PositionCategory,
)


class PositionSchema(BaseModel):
    """Fixed-income holding as received from the caller"""

    position_id: str = Field(..., min_length=1)
    name: str = ""
    category: PositionCategory = PositionCategory.CDB
    principal: float = Field(..., ge=0, allow_inf_nan=False)
    rate_multiplier_percent: float = Field(100.0, ge=0, allow_inf_nan=False, description="100 = 100% of the reference rate")
    deposit_date: date
    maturity_date: Optional[date] = None
    tax_exempt: Optional[bool] = Field(None, description="Defaults to the category exemption (LCI/LCA)")

    def to_domain(self) -> Position:
        exempt = self.category.default_exemption if self.tax_exempt is None else self.tax_exempt
        return Position(
            position_id=self.position_id,
            name=self.name,
            category=self.category,
            principal=self.principal,
            rate_multiplier_percent=self.rate_multiplier_percent,
            deposit_date=self.deposit_date,
            maturity_date=self.maturity_date,
            tax_exempt=exempt,
        )


class ObligationSchema(BaseModel):
    """Installment-based expense as received from the caller"""

    obligation_id: str = Field(..., min_length=1)
    description: str = ""
    total_amount: float = Field(..., ge=0, allow_inf_nan=False)
    installments: int = Field(1, ge=1)
    current_installment: int = Field(1, ge=1)
    start_date: date
    category: str = "other"
    paid: bool = False
    payment_date: Optional[date] = None

    def to_domain(self) -> Obligation:
        return Obligation(
            obligation_id=self.obligation_id,
            description=self.description,
            total_amount=self.total_amount,
            installments=self.installments,
            current_installment=self.current_installment,
            start_date=self.start_date,
            category=self.category,
            paid=self.paid,
            payment_date=self.payment_date,
        )


class GoalSchema(BaseModel):
    """Savings goal as received from the caller"""

    goal_id: str = Field(..., min_length=1)
    name: str = ""
    target_amount: float = Field(..., gt=0, allow_inf_nan=False)
    current_amount: float = Field(0.0, ge=0, allow_inf_nan=False)
    category: GoalCategory = GoalCategory.OTHER
    created_at: date
    deadline: Optional[date] = None
    completed: bool = False
    completed_at: Optional[date] = None

    def to_domain(self) -> FinancialGoal:
        return FinancialGoal(**self.model_dump())


class YieldBreakdownSchema(BaseModel):
    gross_value: float
    gross_return: float
    iof_amount: float
    iof_rate: float
    ir_amount: float
    ir_rate: float
    net_value: float
    net_return: float
    effective_annual_rate: float
    calendar_days: int
    business_days: int


class ReferenceRateResponse(BaseModel):
    """Response for GET /v1/reference-rate"""

    annual_rate: float
    daily_rate: float
    monthly_rate: float


class YieldRequest(BaseModel):
    """Request body for POST /v1/yield"""

    position: PositionSchema
    valuation_date: Optional[date] = Field(None, description="Defaults to today")
    reference_annual_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Defaults to the current reference rate")


class YieldResponse(BaseModel):
    """Response for POST /v1/yield"""

    position_id: str
    valuation_date: date
    reference_annual_rate: float
    breakdown: YieldBreakdownSchema


class SimulationRequest(BaseModel):
    """Request body for POST /v1/simulation"""

    principal: float = Field(..., gt=0, allow_inf_nan=False)
    rate_multiplier_percent: float = Field(100.0, ge=0, allow_inf_nan=False)
    tax_exempt: bool = False
    reference_annual_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulation"""

    reference_annual_rate: float
    year1: YieldBreakdownSchema
    year2: YieldBreakdownSchema


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection"""

    positions: List[PositionSchema] = []
    obligations: List[ObligationSchema] = []
    months: int = Field(12, ge=0)
    monthly_contribution: float = Field(0.0, ge=0, allow_inf_nan=False)
    reference_annual_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    start_date: Optional[date] = Field(None, description="Defaults to today")


class ProjectionPointSchema(BaseModel):
    """Single month in a projection"""

    month: str
    date: date
    net_worth: float
    monthly_expenses: float
    monthly_return: float
    positions_value: float
    contributions_value: float
    cumulative_expenses: float


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    reference_annual_rate: float
    points: List[ProjectionPointSchema]


class SummaryRequest(BaseModel):
    """Request body for POST /v1/summary"""

    positions: List[PositionSchema] = []
    obligations: List[ObligationSchema] = []
    goals: List[GoalSchema] = []
    reference_annual_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False)

    @field_validator("obligations")
    @classmethod
    def obligation_ids_unique(cls, obligations: List[ObligationSchema]) -> List[ObligationSchema]:
        ids = [o.obligation_id for o in obligations]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate obligation_id: {', '.join(duplicates)}")
        return obligations


class SummaryResponse(BaseModel):
    """Response for POST /v1/summary"""

    reference_annual_rate: float
    total_invested: float
    total_net_return: float
    current_value: float
    total_pending_expenses: float
    monthly_commitment: float
    active_goals: int
    remaining_installments: Dict[str, int]


class GoalProgressSchema(BaseModel):
    goal_id: str
    progress_percent: float
    remaining_amount: float
    days_until_deadline: Optional[int] = None
    completed: bool
    completed_at: Optional[date] = None


class GoalsRequest(BaseModel):
    """Request body for POST /v1/goals/progress"""

    goals: List[GoalSchema]


class GoalsResponse(BaseModel):
    """Response for POST /v1/goals/progress"""

    overall_progress_percent: float
    goals: List[GoalProgressSchema]
