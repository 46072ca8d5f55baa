# cosmos_indexer/database/tables/asset.py

from sqlalchemy import Column, String

from ..base import DBEventModel
from ..types import CosmosAddressType


class Asset(DBEventModel):
    """Asset registered on the ANS host"""
    __tablename__ = 'assets'

    sender = Column(CosmosAddressType(), nullable=False)
    source = Column(String(128), nullable=True, index=True)
    name = Column(String(128), nullable=False, index=True)
    type = Column(String(32), nullable=False)  # "cw20", "native", ...
    address = Column(String(128), nullable=True)  # contract address or denom
    ans_host = Column(CosmosAddressType(), nullable=False)

    def __repr__(self) -> str:
        return f"<Asset({self.source}>{self.name}, type={self.type})>"
