from shortlinks.dao.base import UrlRecordBaseDAO
from shortlinks.models import UrlRecordModel, UrlStats


class StatsService:
    """Read-only views over all URL records (admin listing and totals)."""

    def __init__(self, dao: UrlRecordBaseDAO):
        self.dao = dao

    def stats(self) -> UrlStats:
        return UrlStats(total_urls=self.dao.count(), total_clicks=self.dao.total_clicks())

    def list_all(self) -> list[UrlRecordModel]:
        """Return every URL record, newest first."""
        return self.dao.list_all()
