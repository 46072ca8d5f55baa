# cosmos_indexer/database/tables/account.py

from sqlalchemy import Column, String, Text

from ..base import DBBaseModel, BlockchainMixin
from ..types import CosmosAddressType, DecimalString


class Account(DBBaseModel, BlockchainMixin):
    """
    One row per observed account.

    Token holders are created lazily with only ``address`` set (id = address).
    Governance accounts from the account factory carry the full set of role
    and funding columns (id = "<block id>-<tx index>").
    """
    __tablename__ = 'accounts'

    address = Column(CosmosAddressType(), nullable=False, index=True)

    # account-factory columns, null for lazily created holders
    abstract_id = Column(String(64), nullable=True)
    creator = Column(CosmosAddressType(), nullable=True)
    name = Column(String(255), nullable=True)
    owner = Column(CosmosAddressType(), nullable=True)
    manager = Column(CosmosAddressType(), nullable=True, index=True)
    proxy = Column(CosmosAddressType(), nullable=True, index=True)
    admin = Column(CosmosAddressType(), nullable=True)
    description = Column(Text, nullable=True)
    governance_type = Column(String(64), nullable=True)
    funds_denom = Column(String(128), nullable=True)
    funds_amount = Column(DecimalString(), nullable=True)

    @property
    def is_governance_account(self) -> bool:
        return self.governance_type is not None

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, address={self.address})>"
