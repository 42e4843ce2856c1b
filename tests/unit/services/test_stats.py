"""Unit tests for the StatsService"""

from datetime import datetime, timedelta, UTC

import pytest

from shortlinks.models import UrlRecordModel, UrlStats
from shortlinks.dao.memory import UrlRecordMemoryDAO
from shortlinks.services import StatsService, ResolutionService


@pytest.fixture
def dao():
    return UrlRecordMemoryDAO()


def test_stats_without_records(dao):
    assert StatsService(dao).stats() == UrlStats(total_urls=0, total_clicks=0)


def test_stats_sums_clicks(dao):
    for i, clicks in enumerate([3, 0, 5]):
        dao.insert(UrlRecordModel(original_url=f'https://example.com/{i}', shortcode=f'code{i:03d}', created_at=datetime.now(UTC), clicks=clicks))

    assert StatsService(dao).stats() == UrlStats(total_urls=3, total_clicks=8)


def test_stats_follow_resolutions(dao):
    dao.insert(UrlRecordModel(original_url='https://example.com', shortcode='abc123XY', created_at=datetime.now(UTC)))
    resolver = ResolutionService(dao)
    resolver.resolve('abc123XY')
    resolver.resolve('abc123XY')

    assert StatsService(dao).stats() == UrlStats(total_urls=1, total_clicks=2)


def test_list_all_newest_first(dao):
    base = datetime(2025, 10, 15, tzinfo=UTC)
    dao.insert(UrlRecordModel(original_url='https://example.com/old', shortcode='old0001', created_at=base))
    dao.insert(UrlRecordModel(original_url='https://example.com/new', shortcode='new0001', created_at=base + timedelta(days=1)))

    assert [r.shortcode for r in StatsService(dao).list_all()] == ['new0001', 'old0001']
