from linkshortener.models.short_url_model import ShortURLModel
from linkshortener.models.click_model import GeoLocation, ClickContext, ClickModel, ClickLedgerEntry
from linkshortener.models.stats_model import ShortURLStats


__all__ = [
    'ShortURLModel',
    'GeoLocation',
    'ClickContext',
    'ClickModel',
    'ClickLedgerEntry',
    'ShortURLStats',
]
