"""Bank account record and its builder."""

from pattern_gallery.domain.account.account import Account
from pattern_gallery.domain.account.builder import AccountBuilder, new_account_builder

__all__ = ["Account", "AccountBuilder", "new_account_builder"]
