# cosmos_indexer/database/repositories/balance_repository.py

from typing import List, Optional

from sqlalchemy.orm import Session

from ...types import CosmosAddress
from ..base_repository import BaseRepository
from ..tables.account_balance import AccountBalance, AccountBalanceSnapshot


class AccountBalanceRepository(BaseRepository[AccountBalance]):

    def __init__(self, db_manager):
        super().__init__(db_manager, AccountBalance)

    @staticmethod
    def balance_id(account_address: CosmosAddress, token_address: CosmosAddress) -> str:
        return f"{account_address}-{token_address}"

    def get_by_account_and_token(self, session: Session, account_address: CosmosAddress,
                                 token_address: CosmosAddress) -> Optional[AccountBalance]:
        try:
            return session.query(AccountBalance).filter(
                AccountBalance.account_address == account_address,
                AccountBalance.token_address == token_address,
            ).first()
        except Exception as e:
            self.logger.error(f"Error getting AccountBalance for {account_address}/{token_address}: {e}")
            raise

    def get_by_account(self, session: Session, account_address: CosmosAddress) -> List[AccountBalance]:
        try:
            return session.query(AccountBalance).filter(
                AccountBalance.account_address == account_address
            ).order_by(AccountBalance.token_address).all()
        except Exception as e:
            self.logger.error(f"Error getting AccountBalances for {account_address}: {e}")
            raise


class AccountBalanceSnapshotRepository(BaseRepository[AccountBalanceSnapshot]):

    def __init__(self, db_manager):
        super().__init__(db_manager, AccountBalanceSnapshot)

    def get_history(self, session: Session, account_address: CosmosAddress,
                    token_address: CosmosAddress) -> List[AccountBalanceSnapshot]:
        """Snapshots for one pair, oldest first"""
        try:
            return session.query(AccountBalanceSnapshot).filter(
                AccountBalanceSnapshot.account_address == account_address,
                AccountBalanceSnapshot.token_address == token_address,
            ).order_by(AccountBalanceSnapshot.id).all()
        except Exception as e:
            self.logger.error(f"Error getting snapshot history for {account_address}/{token_address}: {e}")
            raise
