"""Data contracts for the dividend calculator endpoint."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from asb_dividend.core.coercion import parse_number, to_period_years
from asb_dividend.core.dividend import SimulationInput, YearlyResult
from asb_dividend.core.i18n import is_supported


class DividendRequest(BaseModel):
    """Raw calculator form. Every numeric field is coerced like a free-text input.

    Absent keys take the form's initial values; present but unusable values
    (empty, non-numeric, zero) take the per-field fallback.
    """

    model_config = ConfigDict(extra="forbid")

    initialBalance: float = Field(50000.0, description="Initial investment amount (RM).")
    monthlyDeposit: float = Field(0.0, description="Deposit added at the end of every month (RM).")
    investmentPeriod: int = Field(1, description="Investment horizon in whole years.")
    dividendRate: float = Field(5.0, description="Annual dividend rate in percent.")
    bonusRate: float = Field(0.5, description="Annual bonus rate in percent.")
    language: Optional[str] = None

    @field_validator("initialBalance", "monthlyDeposit", "dividendRate", "bonusRate", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        return parse_number(v, 0.0)

    @field_validator("investmentPeriod", mode="before")
    @classmethod
    def coerce_period(cls, v: Any) -> int:
        return to_period_years(parse_number(v, 1.0))

    @field_validator("investmentPeriod")
    @classmethod
    def check_period_cap(cls, v: int, info: ValidationInfo) -> int:
        max_years = (info.context or {}).get("max_years")
        if max_years is not None and v > max_years:
            raise ValueError(f"investmentPeriod must not exceed {max_years} years")
        return v

    def to_simulation_input(self) -> SimulationInput:
        return SimulationInput(
            initialBalance=self.initialBalance,
            monthlyDeposit=self.monthlyDeposit,
            investmentPeriodYears=self.investmentPeriod,
            annualDividendRatePercent=self.dividendRate,
            annualBonusRatePercent=self.bonusRate,
        )


class ChartDataset(BaseModel):
    label: str
    data: List[float]


class ChartData(BaseModel):
    """Line-chart series keyed by year."""

    labels: List[str]
    datasets: List[ChartDataset]


class DividendResponse(BaseModel):
    language: str
    title: str
    inputs: SimulationInput
    results: List[YearlyResult]
    chart: ChartData
    # set only when results is empty
    message: Optional[str] = None


class LanguagePreference(BaseModel):
    model_config = ConfigDict(extra="forbid")

    language: str

    @field_validator("language")
    @classmethod
    def check_supported(cls, v: str) -> str:
        if not is_supported(v):
            raise ValueError(f"unsupported language: {v}")
        return v


class TranslationsResponse(BaseModel):
    language: str
    strings: Dict[str, str]
