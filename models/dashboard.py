from dataclasses import dataclass, field


def _num(data: dict, key: str) -> float:
    value = data.get(key)
    return float(value) if value is not None else 0.0


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    return int(value) if value is not None else 0


@dataclass
class TrendData:
    direction: str          # 'up' | 'down'
    percentage: float

    @classmethod
    def from_dict(cls, data: dict | None) -> "TrendData":
        data = data or {}
        return cls(direction=data.get("direction") or "down", percentage=_num(data, "percentage"))


@dataclass
class WeeklyStats:
    spent: float
    transactions: int
    categories: int
    daily_average: float

    @classmethod
    def from_dict(cls, data: dict | None) -> "WeeklyStats":
        data = data or {}
        return cls(
            spent=_num(data, "spent"),
            transactions=_int(data, "transactions"),
            categories=_int(data, "categories"),
            daily_average=_num(data, "dailyAverage"),
        )


@dataclass
class DashboardSummary:
    total_spent: float
    trend_data: TrendData
    weekly_stats: WeeklyStats

    @classmethod
    def from_dict(cls, data: dict) -> "DashboardSummary":
        return cls(
            total_spent=_num(data, "totalSpent"),
            trend_data=TrendData.from_dict(data.get("trendData")),
            weekly_stats=WeeklyStats.from_dict(data.get("weeklyStats")),
        )


@dataclass
class WeeklyTrendData:
    week_start: str         # e.g. "Jan 1, 2024"
    total_spent: float
    transaction_count: int = 0
    week_end: str = ""
    average_daily: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "WeeklyTrendData":
        return cls(
            week_start=data.get("weekStart") or "",
            total_spent=_num(data, "totalSpent"),
            transaction_count=_int(data, "transactionCount"),
            week_end=data.get("weekEnd") or "",
            average_daily=_num(data, "averageDaily"),
        )


# ── Read models for the secondary dashboard endpoints ────────────────────────

@dataclass
class TodayStats:
    today_total: float
    today_transactions: int
    today_categories: int

    @classmethod
    def from_dict(cls, data: dict) -> "TodayStats":
        return cls(
            today_total=_num(data, "todayTotal"),
            today_transactions=_int(data, "todayTransactions"),
            today_categories=_int(data, "todayCategories"),
        )


@dataclass
class DailyBreakdown:
    date: str               # 'YYYY-MM-DD'
    amount: float
    transaction_count: int
    day_name: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "DailyBreakdown":
        return cls(
            date=data.get("date") or "",
            amount=_num(data, "amount"),
            transaction_count=_int(data, "transactionCount"),
            day_name=data.get("dayName") or "",
        )


@dataclass
class CategoryBreakdown:
    category_name: str
    amount: float
    percentage: float
    transaction_count: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "CategoryBreakdown":
        return cls(
            category_name=data.get("categoryName") or "",
            amount=_num(data, "amount"),
            percentage=_num(data, "percentage"),
            transaction_count=_int(data, "transactionCount"),
        )


@dataclass
class CurrentWeekBreakdown:
    week_total: float
    daily_breakdown: list[DailyBreakdown] = field(default_factory=list)
    category_breakdown: list[CategoryBreakdown] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CurrentWeekBreakdown":
        return cls(
            week_total=_num(data, "weekTotal"),
            daily_breakdown=[DailyBreakdown.from_dict(d) for d in data.get("dailyBreakdown") or []],
            category_breakdown=[
                CategoryBreakdown.from_dict(c) for c in data.get("categoryBreakdown") or []
            ],
        )


@dataclass
class ComparisonPeriod:
    current: float
    previous: float
    percentage_change: float
    trend: str              # 'up' | 'down'

    @classmethod
    def from_dict(cls, data: dict | None) -> "ComparisonPeriod":
        data = data or {}
        return cls(
            current=_num(data, "current"),
            previous=_num(data, "previous"),
            percentage_change=_num(data, "percentageChange"),
            trend=data.get("trend") or "down",
        )


@dataclass
class SpendingComparison:
    this_week_vs_last: ComparisonPeriod
    this_month_vs_last: ComparisonPeriod

    @classmethod
    def from_dict(cls, data: dict) -> "SpendingComparison":
        return cls(
            this_week_vs_last=ComparisonPeriod.from_dict(data.get("thisWeekVsLast")),
            this_month_vs_last=ComparisonPeriod.from_dict(data.get("thisMonthVsLast")),
        )
