# cosmos_indexer/database/repositories/token_repository.py

from typing import Optional

from sqlalchemy.orm import Session

from ...types import CosmosAddress
from ..base_repository import BaseRepository
from ..tables.token import Token


class TokenRepository(BaseRepository[Token]):

    def __init__(self, db_manager):
        super().__init__(db_manager, Token)

    def get_by_address(self, session: Session, address: CosmosAddress) -> Optional[Token]:
        try:
            return session.query(Token).filter(Token.address == address).first()
        except Exception as e:
            self.logger.error(f"Error getting Token by address {address}: {e}")
            raise
