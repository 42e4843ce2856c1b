"""Tests running UrlRecordRedisDAO against an in-process Redis server

The Lua insert script and the MULTI hit run for real on fakeredis (with its
Lua engine), so the uniqueness checks and counter updates are exercised
end to end rather than mocked.

Test coverage includes:

1. Insertion
   - Ensures a fresh record is stored with its index entries.
   - Confirms a taken shortcode is rejected and nothing is written.
   - Confirms a taken original URL returns the owner's shortcode and nothing is written.
   - Ensures a digest collision on the URL index stores the record and keeps the index owner.

2. Hits and aggregates
   - Ensures hit() bumps the record and the global total.
   - Ensures initial clicks count towards total_clicks().
   - Ensures list_all() returns records newest first.
"""

from datetime import datetime, UTC

import fakeredis
import pytest

from shortlinks.models import UrlRecordModel
from shortlinks.dao.redis import UrlRecordRedisDAO
from shortlinks.dao.exceptions import ShortCodeAlreadyExistsError, OriginalUrlAlreadyExistsError


CREATED_AT = datetime(2025, 10, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def fake_redis():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def dao(fake_redis, app_prefix):
    return UrlRecordRedisDAO(redis_client=fake_redis, prefix=app_prefix)


def make_record(original_url: str, shortcode: str, **kwargs) -> UrlRecordModel:
    return UrlRecordModel(original_url=original_url, shortcode=shortcode, created_at=kwargs.pop('created_at', CREATED_AT), **kwargs)


# -------------------------------
# 1. Insertion
# -------------------------------


def test_insert_stores_record(dao, fake_redis):
    dao.insert(make_record('https://example.com/a', 'aaaa1111'))

    assert dao.get('aaaa1111') == make_record('https://example.com/a', 'aaaa1111')
    assert fake_redis.get(dao.keys.url_index_key('https://example.com/a')) == 'aaaa1111'
    assert dao.find_by_original_url('https://example.com/a').shortcode == 'aaaa1111'
    assert dao.count() == 1


def test_insert_with_taken_shortcode_writes_nothing(dao, fake_redis):
    dao.insert(make_record('https://example.com/a', 'aaaa1111'))

    with pytest.raises(ShortCodeAlreadyExistsError):
        dao.insert(make_record('https://example.com/b', 'aaaa1111'))

    assert dao.get('aaaa1111').original_url == 'https://example.com/a'
    assert fake_redis.exists(dao.keys.url_index_key('https://example.com/b')) == 0
    assert dao.count() == 1


def test_insert_with_taken_original_url_returns_owner(dao, fake_redis):
    dao.insert(make_record('https://example.com/a', 'aaaa1111'))

    with pytest.raises(OriginalUrlAlreadyExistsError) as exc_info:
        dao.insert(make_record('https://example.com/a', 'bbbb2222'))

    assert exc_info.value.shortcode == 'aaaa1111'
    assert fake_redis.exists(dao.keys.record_key('bbbb2222')) == 0
    assert dao.count() == 1


def test_insert_with_url_digest_collision(dao, fake_redis):
    """Two different URLs sharing an index entry must not be treated as the same URL."""
    dao.insert(make_record('https://example.com/a', 'aaaa1111'))
    colliding_index_key = dao.keys.url_index_key('https://example.com/b')
    fake_redis.set(colliding_index_key, 'aaaa1111')

    dao.insert(make_record('https://example.com/b', 'bbbb2222'))

    assert dao.get('bbbb2222').original_url == 'https://example.com/b'
    assert fake_redis.get(colliding_index_key) == 'aaaa1111'
    assert dao.find_by_original_url('https://example.com/a').shortcode == 'aaaa1111'
    assert dao.count() == 2


# -------------------------------
# 2. Hits and aggregates
# -------------------------------


def test_hit_updates_record_and_total(dao):
    dao.insert(make_record('https://example.com/a', 'aaaa1111'))
    accessed_at = datetime(2025, 10, 16, 8, 30, tzinfo=UTC)

    dao.hit('aaaa1111')
    url_record = dao.hit('aaaa1111', accessed_at=accessed_at)

    assert url_record.clicks == 2
    assert url_record.last_accessed == accessed_at
    assert dao.get('aaaa1111') == url_record
    assert dao.total_clicks() == 2


def test_initial_clicks_count_towards_total(dao):
    dao.insert(make_record('https://example.com/a', 'aaaa1111', clicks=5))
    dao.insert(make_record('https://example.com/b', 'bbbb2222'))
    dao.hit('bbbb2222')

    assert dao.total_clicks() == sum(url_record.clicks for url_record in dao.list_all()) == 6


def test_list_all_newest_first(dao):
    dao.insert(make_record('https://example.com/old', 'old11111', created_at=datetime(2025, 1, 1, tzinfo=UTC)))
    dao.insert(make_record('https://example.com/new', 'new11111', created_at=datetime(2025, 6, 1, tzinfo=UTC)))

    assert [url_record.shortcode for url_record in dao.list_all()] == ['new11111', 'old11111']
