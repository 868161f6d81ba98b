import logging
import threading

from models.dashboard import DashboardSummary, WeeklyTrendData
from services.dashboard_service import DashboardService
from utils.constants import LOAD_DASHBOARD_ERROR

log = logging.getLogger(__name__)


class DashboardState:
    """Snapshot of the dashboard summary and weekly trend.

    fetch() reads both concurrently. Each call takes a new generation number and
    only the latest generation may commit data, set error or clear loading, so
    a slow superseded fetch can never overwrite newer state.
    """

    def __init__(self, dashboard_service: DashboardService):
        self._svc = dashboard_service
        self._lock = threading.Lock()
        self._load_gen = 0
        self.summary: DashboardSummary | None = None
        self.weekly_trend: list[WeeklyTrendData] = []
        self.loading = False
        self.error: str | None = None

    @property
    def generation(self) -> int:
        return self._load_gen

    def fetch(self) -> bool:
        """Blocking; run it off the UI thread. Returns False if superseded."""
        with self._lock:
            self._load_gen += 1
            gen = self._load_gen
            self.loading = True
            self.error = None

        results: dict[str, object] = {}
        errors: list[BaseException] = []     # in the order they were observed
        record = threading.Lock()

        def run(key, call):
            try:
                value = call()
            except Exception as e:
                log.warning("Dashboard %s fetch failed: %s", key, e)
                with record:
                    errors.append(e)
            else:
                with record:
                    results[key] = value

        workers = [
            threading.Thread(target=run, args=("summary", self._svc.get_dashboard_summary),
                             name=f"dashboard-summary-{gen}", daemon=True),
            threading.Thread(target=run, args=("weekly_trend", self._svc.get_weekly_trend),
                             name=f"dashboard-trend-{gen}", daemon=True),
        ]
        for t in workers:
            t.start()
        for t in workers:
            t.join()

        with self._lock:
            if gen != self._load_gen:
                log.debug("Discarding dashboard fetch %d (latest is %d)", gen, self._load_gen)
                return False
            if errors:
                self.error = _error_message(errors[0])
            else:
                self.summary = results["summary"]
                self.weekly_trend = list(results["weekly_trend"])
            self.loading = False
        return True

    def refetch(self) -> bool:
        return self.fetch()

    refresh = refetch


def _error_message(exc: BaseException) -> str:
    return str(exc) or LOAD_DASHBOARD_ERROR
