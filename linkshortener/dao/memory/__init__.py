from linkshortener.dao.memory.locks import ReadWriteLock
from linkshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO
from linkshortener.dao.memory.click_ledger_memory_dao import ClickLedgerMemoryDAO


__all__ = [
    'ReadWriteLock',
    'ShortURLMemoryDAO',
    'ClickLedgerMemoryDAO',
]
