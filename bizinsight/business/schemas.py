"""Pydantic schemas for the business profile."""

from pydantic import BaseModel, ConfigDict, Field

from bizinsight.business.constants import Industry, Trend


class BusinessProfile(BaseModel):
    """Structured business metrics supplied by the user."""

    model_config = ConfigDict(allow_inf_nan=False, validate_assignment=True)

    industry: Industry = Field(description="Industry category")
    monthly_revenue: float = Field(ge=0, description="Monthly revenue in dollars")
    monthly_expenses: float = Field(ge=0, description="Monthly expenses in dollars")
    customer_count: int = Field(ge=0, description="Number of customers")
    trend: Trend = Field(description="Recent business trend")
    goals: str = Field(default="", description="Free-text business goals")

    @property
    def net_profit(self) -> float:
        """Revenue minus expenses; negative for a loss."""
        return self.monthly_revenue - self.monthly_expenses


class BusinessProfileUpdate(BaseModel):
    """Field-level edit to a profile. Omitted fields are left unchanged."""

    model_config = ConfigDict(allow_inf_nan=False, extra="forbid")

    industry: Industry | None = None
    monthly_revenue: float | None = Field(default=None, ge=0)
    monthly_expenses: float | None = Field(default=None, ge=0)
    customer_count: int | None = Field(default=None, ge=0)
    trend: Trend | None = None
    goals: str | None = None


class ChartSlice(BaseModel):
    """One segment of the profit/expense donut."""

    name: str
    value: float


class FinancialSummary(BaseModel):
    """Derived figures shown next to the profile form."""

    net_profit: float
    is_profitable: bool
    slices: list[ChartSlice]
