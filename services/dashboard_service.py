from models.dashboard import (
    CurrentWeekBreakdown,
    DashboardSummary,
    SpendingComparison,
    TodayStats,
    WeeklyTrendData,
)
from services.api_client import ApiClient
from utils.constants import DEFAULT_DASHBOARD_PREFIX


class DashboardService:
    """Read-only access to the server-computed dashboard aggregates."""

    def __init__(self, client: ApiClient, prefix: str = DEFAULT_DASHBOARD_PREFIX):
        self._client = client
        self._prefix = prefix.rstrip("/")

    def _get(self, name: str):
        return self._client.get(f"{self._prefix}/{name}")

    def get_dashboard_summary(self) -> DashboardSummary:
        """Totals for today, this week and this month plus the week-over-week trend."""
        return DashboardSummary.from_dict(self._get("summary"))

    def get_weekly_trend(self) -> list[WeeklyTrendData]:
        """Spending per week for the last six weeks."""
        return [WeeklyTrendData.from_dict(d) for d in self._get("weekly-trend") or []]

    def get_today_stats(self) -> TodayStats:
        return TodayStats.from_dict(self._get("today"))

    def get_current_week_breakdown(self) -> CurrentWeekBreakdown:
        return CurrentWeekBreakdown.from_dict(self._get("current-week"))

    def get_spending_comparison(self) -> SpendingComparison:
        """This week vs last week and this month vs last month."""
        return SpendingComparison.from_dict(self._get("comparison"))
