# cosmos_indexer/database/repositories/account_repository.py

from typing import Optional

from sqlalchemy.orm import Session

from ...types import CosmosAddress
from ..base_repository import BaseRepository
from ..tables.account import Account


class AccountRepository(BaseRepository[Account]):
    """Repository for accounts, with lookups by address and delegated roles"""

    def __init__(self, db_manager):
        super().__init__(db_manager, Account)

    def get_by_address(self, session: Session, address: CosmosAddress) -> Optional[Account]:
        return self._first_by(session, Account.address, address)

    def get_by_manager(self, session: Session, manager: CosmosAddress) -> Optional[Account]:
        return self._first_by(session, Account.manager, manager)

    def get_by_proxy(self, session: Session, proxy: CosmosAddress) -> Optional[Account]:
        return self._first_by(session, Account.proxy, proxy)

    def _first_by(self, session: Session, column, value) -> Optional[Account]:
        if not value:
            return None
        try:
            # governance rows sort before bare holder rows for the same address
            return session.query(Account).filter(column == value).order_by(
                Account.governance_type.is_(None), Account.created_at, Account.id
            ).first()
        except Exception as e:
            self.logger.error(f"Error getting Account by {column.key} {value}: {e}")
            raise
