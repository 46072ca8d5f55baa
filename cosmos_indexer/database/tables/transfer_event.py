# cosmos_indexer/database/tables/transfer_event.py

from sqlalchemy import Column

from ..base import DBEventModel
from ..types import CosmosAddressType, DecimalString


class TransferEvent(DBEventModel):
    __tablename__ = 'transfer_events'

    token = Column(CosmosAddressType(), nullable=False, index=True)
    amount = Column(DecimalString(), nullable=False)
    sender = Column(CosmosAddressType(), nullable=False, index=True)
    destination = Column(CosmosAddressType(), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<TransferEvent(token={self.token}, sender={self.sender}, destination={self.destination}, amount={self.amount})>"
