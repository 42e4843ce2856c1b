from shortlinks.services.shortening import ShorteningService
from shortlinks.services.resolution import ResolutionService
from shortlinks.services.stats import StatsService


__all__ = [
    'ShorteningService',
    'ResolutionService',
    'StatsService',
]
