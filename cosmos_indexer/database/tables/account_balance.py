# cosmos_indexer/database/tables/account_balance.py

from decimal import Decimal

from sqlalchemy import Column, ForeignKey, Integer, String, Index

from ..base import DBBaseModel, BlockchainMixin, TimestampMixin, ModelBase
from ..types import CosmosAddressType, DecimalString


class AccountBalance(DBBaseModel, BlockchainMixin):
    """Running balance of one (account, token) pair; id = "<account>-<token>"."""
    __tablename__ = 'account_balances'

    account_id = Column(String(255), ForeignKey('accounts.id'), nullable=False, index=True)
    account_address = Column(CosmosAddressType(), nullable=False)
    token_id = Column(String(255), ForeignKey('tokens.id'), nullable=False, index=True)
    token_address = Column(CosmosAddressType(), nullable=False)
    amount = Column(DecimalString(), nullable=False, default=Decimal(0))
    last_transfer_id = Column(String(255), nullable=True)

    __table_args__ = (
        Index('ix_account_balances_account_token', 'account_address', 'token_address', unique=True),
    )

    def __repr__(self) -> str:
        return f"<AccountBalance(account={self.account_address}, token={self.token_address}, amount={self.amount})>"


class AccountBalanceSnapshot(ModelBase, TimestampMixin, BlockchainMixin):
    """Append-only copy of an AccountBalance taken after each update"""
    __tablename__ = 'account_balance_snapshots'

    id = Column(Integer, primary_key=True, autoincrement=True)
    balance_id = Column(String(255), ForeignKey('account_balances.id'), nullable=False, index=True)
    account_address = Column(CosmosAddressType(), nullable=False, index=True)
    token_address = Column(CosmosAddressType(), nullable=False, index=True)
    amount = Column(DecimalString(), nullable=False)
    delta = Column(DecimalString(), nullable=False)
    transfer_id = Column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<AccountBalanceSnapshot(id={self.id}, account={self.account_address}, amount={self.amount})>"
