from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Insight(_FrozenModel):
    type: Literal["warning", "info", "success"]
    title: str
    message: str
    # Presentation hints, passed through untouched
    icon: str = ""
    color: str = ""


class Recommendation(_FrozenModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    title: str
    description: str
    potential_savings: str = Field(default="TBD", alias="potentialSavings")


class BudgetAlert(_FrozenModel):
    type: Literal["warning", "info"]
    title: str
    message: str
    icon: str = ""


class InsightPayload(_FrozenModel):
    """The structured shape requested from the language model."""

    insights: List[Insight]
    recommendations: List[Recommendation]


class InsightReport(_FrozenModel):
    insights: List[Insight]
    recommendations: List[Recommendation]
    budget_alerts: List[BudgetAlert] = Field(alias="budgetAlerts")
