from linkshortener.handlers import shorten_url, redirect_url, url_stats, delete_url, sweep_expired


__all__ = [
    'shorten_url',
    'redirect_url',
    'url_stats',
    'delete_url',
    'sweep_expired',
]
