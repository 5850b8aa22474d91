from linkshortener.dao.base.short_url_base_dao import ShortURLBaseDAO
from linkshortener.dao.base.click_ledger_base_dao import ClickLedgerBaseDAO


__all__ = [
    'ShortURLBaseDAO',
    'ClickLedgerBaseDAO',
]
