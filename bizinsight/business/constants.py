"""
Business profile constants and enums.
"""

from enum import Enum


class Industry(str, Enum):
    """Industries a business profile can belong to."""

    RETAIL = "Retail"
    ECOMMERCE = "E-commerce"
    FOOD_SERVICE = "Food & Beverage"
    TECH_SAAS = "Technology / SaaS"
    SERVICES = "Professional Services"
    MANUFACTURING = "Manufacturing"
    OTHER = "Other"


class Trend(str, Enum):
    """Recent direction of the business."""

    UP = "up"
    STABLE = "stable"
    DOWN = "down"


DEFAULT_GOALS_TEXT = "General growth and stability"

EXPENSES_SLICE = "Expenses"
PROFIT_SLICE = "Profit"
