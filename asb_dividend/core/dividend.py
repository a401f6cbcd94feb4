from __future__ import annotations

from typing import List, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict

from asb_dividend.constants import (
    BONUS_ELIGIBLE_BALANCE_CAP,
    MONTHS_PER_YEAR,
    REPORT_DECIMALS,
)


class SimulationInput(BaseModel):
    """The five scalars one simulation run consumes.

    Carries no field constraints: ``is_valid`` is the only gate, and a record
    failing it simulates to an empty table.
    """

    model_config = ConfigDict(frozen=True)

    initialBalance: float
    monthlyDeposit: float
    investmentPeriodYears: int
    annualDividendRatePercent: float
    annualBonusRatePercent: float

    def is_valid(self) -> bool:
        return not (
            self.initialBalance <= 0
            or self.annualDividendRatePercent < 0
            or self.annualBonusRatePercent < 0
            or self.investmentPeriodYears <= 0
        )


class YearlyResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    totalWealth: float


def simulate_dividends(inputs: SimulationInput) -> List[YearlyResult]:
    """
    Build the year-by-year balance table for a dividend + bonus scheme.

    Order of operations (per year, balance carried forward between years):
      1) For each month: dividend on the whole balance, bonus on the balance up to
         BONUS_ELIGIBLE_BALANCE_CAP, both accrued (not credited) for the year.
      2) Monthly deposit lands at the END of the month, so it only earns from the
         following month on.
      3) After the 12th month the year's accrued dividend and bonus are credited once.
      4) Record the balance rounded to 2 dp; the unrounded balance feeds next year.

    Returns [] when the inputs fail the gate (non-positive balance or horizon,
    negative rates).
    """
    if not inputs.is_valid():
        logger.debug(f"Rejected simulation input: {inputs.model_dump()}")
        return []

    dividend_rate = inputs.annualDividendRatePercent / 100
    bonus_rate = inputs.annualBonusRatePercent / 100

    current_balance = float(inputs.initialBalance)
    rows: List[YearlyResult] = []

    for year in range(1, inputs.investmentPeriodYears + 1):
        total_dividend = 0.0
        total_bonus = 0.0

        for _month in range(MONTHS_PER_YEAR):
            monthly_dividend = current_balance * dividend_rate / MONTHS_PER_YEAR
            bonus_balance = min(current_balance, BONUS_ELIGIBLE_BALANCE_CAP)
            monthly_bonus = bonus_balance * bonus_rate / MONTHS_PER_YEAR

            total_dividend += monthly_dividend
            total_bonus += monthly_bonus

            current_balance += inputs.monthlyDeposit

        current_balance += total_dividend + total_bonus

        # rounding is for the record only; current_balance keeps full precision
        rows.append(
            YearlyResult(year=year, totalWealth=round(current_balance, REPORT_DECIMALS))
        )

    return rows


def simulate(
    initial_balance: float,
    monthly_deposit: float,
    investment_period_years: int,
    annual_dividend_rate_percent: float,
    annual_bonus_rate_percent: float,
) -> List[YearlyResult]:
    """Scalar-argument entry point; see simulate_dividends."""
    return simulate_dividends(
        SimulationInput(
            initialBalance=initial_balance,
            monthlyDeposit=monthly_deposit,
            investmentPeriodYears=investment_period_years,
            annualDividendRatePercent=annual_dividend_rate_percent,
            annualBonusRatePercent=annual_bonus_rate_percent,
        )
    )


def wealth_series(results: Sequence[YearlyResult]) -> Tuple[List[str], List[float]]:
    """Chart labels (year as text) and values, taken from the rounded records."""
    labels = [str(row.year) for row in results]
    values = [row.totalWealth for row in results]
    return labels, values


__all__ = [
    "SimulationInput",
    "YearlyResult",
    "simulate_dividends",
    "simulate",
    "wealth_series",
]
