"""Dashboard statistics service."""

from ecodamage.database.base import Database
from ecodamage.domain.entities import DashboardStatistics, SeverityLevel

RECENT_REPORTS_LIMIT = 5


class DashboardService:
    """Aggregate figures over all recorded reports."""

    def __init__(self, db: Database):
        self.db = db

    def get_statistics(self, recent_limit: int = RECENT_REPORTS_LIMIT) -> DashboardStatistics:
        """Collect report totals, active category count and the latest reports.

        Args:
            recent_limit: Number of most recent reports to include

        Returns:
            DashboardStatistics
        """
        return DashboardStatistics(
            total_reports=self.db.count_reports(),
            total_damage=self.db.get_total_damage(),
            critical_reports=self.db.count_reports(severity_level=SeverityLevel.CRITICAL),
            active_categories=self.db.count_categories(active_only=True),
            recent_reports=self.db.list_reports(limit=recent_limit),
        )
