# cosmos_indexer/database/repositories/transfer_event_repository.py

from typing import List

from sqlalchemy.orm import Session

from ...types import CosmosAddress
from ..base_repository import BaseRepository
from ..tables.transfer_event import TransferEvent


class TransferEventRepository(BaseRepository[TransferEvent]):
    """Repository for transfer events"""

    def __init__(self, db_manager):
        super().__init__(db_manager, TransferEvent)

    def get_by_token(self, session: Session, token: CosmosAddress, limit: int = 100) -> List[TransferEvent]:
        try:
            return session.query(TransferEvent).filter(
                TransferEvent.token == token
            ).order_by(TransferEvent.block_height, TransferEvent.id).limit(limit).all()
        except Exception as e:
            self.logger.error(f"Error getting TransferEvents by token {token}: {e}")
            raise
