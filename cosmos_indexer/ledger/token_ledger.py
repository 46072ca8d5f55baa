# cosmos_indexer/ledger/token_ledger.py

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from ..core.config import IndexerConfig
from ..core.logging import LoggingMixin
from ..database.tables import Token
from ..types import CosmosAddress, CosmosEvent, Cw20Instantiate, TxContext
from ..utils.amounts import add_amounts, sum_amounts, uint_amount, AmountLike


class TokenLedger(LoggingMixin):
    """Token metadata and cumulative transfer statistics, keyed by contract address"""

    def __init__(self, db_manager, config: IndexerConfig):
        self.config = config
        self.tokens = db_manager.get_token_repo()

    def get_token_by_address(self, session: Session, address: CosmosAddress) -> Optional[Token]:
        return self.tokens.get_by_address(session, address)

    def register_token(self, session: Session, event: CosmosEvent,
                       address: CosmosAddress) -> Optional[Token]:
        """Create the Token for an instantiate message.

        Messages whose code id is not recognized are skipped and yield None.
        An address that is already registered keeps its row and counters.
        """
        code_id = event.message.code_id
        if not self.config.is_recognized_code_id(code_id):
            self.log_debug("Skipping instantiate with unrecognized code id",
                           tx_hash=event.tx.hash,
                           contract_address=address,
                           code_id=code_id)
            return None

        existing = self.get_token_by_address(session, address)
        if existing is not None:
            self.log_warning("Token already registered, instantiate ignored",
                             tx_hash=event.tx.hash,
                             token=address)
            return existing

        msg = Cw20Instantiate.decode(event.message.msg)

        token = Token(
            id=address,
            address=address,
            code_id=code_id,
            decimals=msg.decimals,
            name=msg.name,
            symbol=msg.symbol,
            source=event.message.sender,
            minter=msg.mint.minter if msg.mint else None,
            transfer_event_count=0,
            total_supply=sum_amounts(uint_amount(coin.amount) for coin in msg.initial_balances),
            total_transferred=Decimal(0),
            block_height=event.tx.height,
            timestamp=event.tx.time,
            tx_hash=event.tx.hash,
        )
        token = self.tokens.save(session, token)

        self.log_info("Token registered",
                      tx_hash=event.tx.hash,
                      token=address,
                      symbol=msg.symbol)
        return token

    def record_transfer(self, session: Session, address: CosmosAddress, amount: AmountLike,
                        tx: Optional[TxContext] = None) -> Optional[Token]:
        """Count one transfer against the token; None when the token is unknown"""
        token = self.get_token_by_address(session, address)
        if token is None:
            self.log_debug("Transfer on unregistered token dropped", token=address)
            return None

        token.transfer_event_count = (token.transfer_event_count or 0) + 1
        token.total_transferred = add_amounts(token.total_transferred, uint_amount(amount))
        if tx is not None:
            token.block_height = tx.height
            token.timestamp = tx.time
            token.tx_hash = tx.hash

        return self.tokens.save(session, token)
