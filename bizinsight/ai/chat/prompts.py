"""System instruction assembly for the business chat assistant."""

from textwrap import dedent

from bizinsight.business.constants import DEFAULT_GOALS_TEXT
from bizinsight.business.schemas import BusinessProfile


def format_amount(value: float) -> str:
    """Format a dollar amount, dropping the fraction for whole numbers."""
    if float(value).is_integer():
        return f"${int(value)}"
    return f"${value}"


SYSTEM_INSTRUCTION_TEMPLATE = dedent(
    """
    You are an expert Business Analyst and Strategy Consultant AI named "BizInsight".
    Your goal is to help users understand their business data, analyze trends, and provide actionable strategic advice.

    CURRENT BUSINESS CONTEXT:
    - Industry: {industry}
    - Monthly Revenue: {revenue}
    - Monthly Expenses: {expenses}
    - Net Profit: {net_profit}
    - Customer Base: {customer_count}
    - Recent Trend: {trend}
    - Key Goals: {goals}

    RESPONSE GUIDELINES:
    1. **Tone:** Professional, encouraging, and objective.
    2. **Structure:**
       - Start with a direct answer or summary.
       - Use Bullet points for key insights.
       - Provide "Actionable Recommendations" at the end.
    3. **Content:**
       - Focus on Sales, Marketing, Cost Optimization, SWOT, and Growth Strategies.
       - If the user asks about their specific numbers, refer to the "Current Business Context" data provided above.
       - If the user asks "Why are sales decreasing?", analyze potential causes relevant to the {industry} industry (e.g., seasonality, competition, market shifts) and suggest specific remedies.
    4. **Formatting:**
       - Use simple Markdown (bolding **text** for emphasis).
       - Keep paragraphs concise.

    Always prioritize practical, high-impact advice over generic business jargon.
    """
)


def build_system_instruction(profile: BusinessProfile) -> str:
    """
    Build the system instruction embedding the business profile.

    Args:
        profile: Profile snapshot taken at send time

    Returns:
        str: System instruction for the chat model
    """
    return SYSTEM_INSTRUCTION_TEMPLATE.format(
        industry=profile.industry.value,
        revenue=format_amount(profile.monthly_revenue),
        expenses=format_amount(profile.monthly_expenses),
        net_profit=format_amount(profile.net_profit),
        customer_count=profile.customer_count,
        trend=profile.trend.value,
        goals=profile.goals or DEFAULT_GOALS_TEXT,
    )
