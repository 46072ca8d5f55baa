# cosmos_indexer/database/tables/token.py

from decimal import Decimal

from sqlalchemy import Column, Integer, String

from ..base import DBBaseModel, BlockchainMixin
from ..types import CosmosAddressType, DecimalString


class Token(DBBaseModel, BlockchainMixin):
    """cw20 token, keyed by contract address"""
    __tablename__ = 'tokens'

    address = Column(CosmosAddressType(), nullable=False, unique=True)
    code_id = Column(Integer, nullable=True)
    decimals = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    symbol = Column(String(64), nullable=False, index=True)
    source = Column(CosmosAddressType(), nullable=False)  # creator
    minter = Column(CosmosAddressType(), nullable=True)
    transfer_event_count = Column(Integer, nullable=False, default=0)
    total_supply = Column(DecimalString(), nullable=False, default=Decimal(0))
    total_transferred = Column(DecimalString(), nullable=False, default=Decimal(0))

    def __repr__(self) -> str:
        return f"<Token(symbol={self.symbol}, address={self.address})>"
