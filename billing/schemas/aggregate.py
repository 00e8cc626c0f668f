from pydantic import BaseModel


class PeriodTotals(BaseModel):
    month: float
    week: float
    total: float


class SummaryResponse(BaseModel):
    income: PeriodTotals
    expense: PeriodTotals


class MonthlyAmount(BaseModel):
    month: int  # 0 = January
    amount: float


class LineChartResponse(BaseModel):
    year: int
    expense: list[MonthlyAmount]
    income: list[MonthlyAmount]
