from shortlinks.models.url_record_model import UrlRecordModel, ShortenResult, UrlStats


__all__ = [
    'UrlRecordModel',
    'ShortenResult',
    'UrlStats',
]
