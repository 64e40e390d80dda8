"""
In-memory business profile store and derived financial figures.
"""

from bizinsight.business.constants import (
    EXPENSES_SLICE,
    PROFIT_SLICE,
    Industry,
    Trend,
)
from bizinsight.business.schemas import (
    BusinessProfile,
    BusinessProfileUpdate,
    ChartSlice,
    FinancialSummary,
)
from bizinsight.utils.logger import logger


def default_profile() -> BusinessProfile:
    """Sample profile the session starts with."""
    return BusinessProfile(
        industry=Industry.RETAIL,
        monthly_revenue=15000,
        monthly_expenses=8000,
        customer_count=450,
        trend=Trend.STABLE,
        goals="",
    )


def summarize(profile: BusinessProfile) -> FinancialSummary:
    """Compute net profit and the expense/profit chart slices.

    The profit slice is clamped at zero so a loss renders as an
    expenses-only chart.
    """
    net_profit = profile.net_profit
    return FinancialSummary(
        net_profit=net_profit,
        is_profitable=net_profit >= 0,
        slices=[
            ChartSlice(name=EXPENSES_SLICE, value=profile.monthly_expenses),
            ChartSlice(name=PROFIT_SLICE, value=max(0.0, net_profit)),
        ],
    )


class ProfileStore:
    """Holds the current business profile for the session."""

    def __init__(self, profile: BusinessProfile | None = None):
        self._profile = profile or default_profile()

    def get(self) -> BusinessProfile:
        """Return a copy of the current profile.

        Callers get a snapshot; later edits do not affect it.
        """
        return self._profile.model_copy()

    def replace(self, profile: BusinessProfile) -> BusinessProfile:
        """Overwrite the whole profile."""
        self._profile = profile.model_copy()
        logger.info("Business profile replaced", industry=profile.industry.value)
        return self.get()

    def update(self, changes: BusinessProfileUpdate) -> BusinessProfile:
        """Apply a field-level edit.

        The merged profile is validated before it is stored, so a rejected
        edit leaves the current profile unchanged.

        Raises:
            pydantic.ValidationError: If the merged profile is invalid
        """
        fields = changes.model_dump(exclude_unset=True, exclude_none=True)
        merged = BusinessProfile.model_validate(
            {**self._profile.model_dump(), **fields}
        )
        self._profile = merged
        logger.info("Business profile updated", fields=sorted(fields))
        return self.get()
