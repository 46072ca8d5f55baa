# cosmos_indexer/ledger/balance_ledger.py

import enum
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from ..core.logging import LoggingMixin
from ..database.tables import Account, AccountBalance, TransferEvent
from ..types import CosmosAddress
from ..utils.amounts import add_amounts, amount_to_decimal, negate


class TransferSide(enum.Enum):
    SENDER = "sender"
    DESTINATION = "destination"


class BalanceLedger(LoggingMixin):
    """
    Running balance per (account, token) pair plus an append-only snapshot
    history.

    Each transfer is applied twice, once per side. The sender side moves the
    balance by -amount and the destination side by +amount, including when
    the row is first created. A self-transfer applies both and nets to zero.
    """

    def __init__(self, db_manager):
        self.balances = db_manager.get_balance_repo()
        self.snapshots = db_manager.get_balance_snapshot_repo()

    @staticmethod
    def signed_delta(account_address: CosmosAddress, transfer: TransferEvent,
                     side: Optional[TransferSide] = None) -> Decimal:
        if side is None:
            is_sender = account_address.lower() == transfer.sender.lower()
            side = TransferSide.SENDER if is_sender else TransferSide.DESTINATION

        if side is TransferSide.SENDER:
            return negate(transfer.amount)
        return amount_to_decimal(transfer.amount)

    def apply_transfer(self, session: Session, account: Account, token_id: str,
                       token_address: CosmosAddress, transfer: TransferEvent,
                       side: Optional[TransferSide] = None) -> AccountBalance:
        delta = self.signed_delta(account.address, transfer, side)

        balance = self.balances.get_by_account_and_token(session, account.address, token_address)
        if balance is None:
            balance = AccountBalance(
                id=self.balances.balance_id(account.address, token_address),
                account_id=account.id,
                account_address=account.address,
                token_id=token_id,
                token_address=token_address,
                amount=delta,
            )
        else:
            balance.amount = add_amounts(balance.amount, delta)

        balance.block_height = transfer.block_height
        balance.timestamp = transfer.timestamp
        balance.tx_hash = transfer.tx_hash
        balance.last_transfer_id = transfer.id
        balance = self.balances.save(session, balance)

        self.snapshots.create(
            session,
            balance_id=balance.id,
            account_address=balance.account_address,
            token_address=balance.token_address,
            amount=balance.amount,
            delta=delta,
            transfer_id=transfer.id,
            block_height=transfer.block_height,
            timestamp=transfer.timestamp,
            tx_hash=transfer.tx_hash,
        )

        self.log_debug("Balance updated",
                       tx_hash=transfer.tx_hash,
                       account=balance.account_address,
                       token=token_address,
                       amount=str(delta),
                       balance=str(balance.amount))
        return balance
