"""Placeholder chart series.

The monthly performance chart is not derived from stored data yet; these
fixed values (millions) only give the chart its shape. Kept apart from
``dashboard`` so callers can tell fixtures from computed figures.
"""

from pydantic import BaseModel


class MonthlyPerformance(BaseModel):
    labels: list[str]
    revenues: list[float]
    expenses: list[float]
    profits: list[float]
    sample: bool = True


class ProfitTrend(BaseModel):
    labels: list[str]
    data: list[float]
    sample: bool = True


class SampleDataProvider:
    """Static six-month revenue/expense series."""

    MONTHS = ["يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو"]
    REVENUES = [1.2, 1.5, 2.0, 2.1, 5.5, 4.2]
    EXPENSES = [0.9, 1.1, 1.3, 1.6, 2.8, 2.5]

    def monthly_performance(self) -> MonthlyPerformance:
        profits = [round(r - e, 2) for r, e in zip(self.REVENUES, self.EXPENSES)]
        return MonthlyPerformance(
            labels=list(self.MONTHS),
            revenues=list(self.REVENUES),
            expenses=list(self.EXPENSES),
            profits=profits,
        )

    def profit_trend(self) -> ProfitTrend:
        performance = self.monthly_performance()
        return ProfitTrend(labels=performance.labels, data=performance.profits)
