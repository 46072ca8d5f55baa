# cosmos_indexer/handlers/transfers.py

from sqlalchemy.orm import Session

from ..database.tables import TransferEvent
from ..ledger import AddressVerifier, TokenLedger, AccountRegistry, BalanceLedger, TransferSide
from ..types import CosmosAddress, CosmosEvent, Send, Transfer, TransferLike
from ..utils.amounts import uint_amount
from .base import BaseHandler


def build_transfer_event(event: CosmosEvent, token: CosmosAddress, msg: TransferLike) -> TransferEvent:
    return TransferEvent(
        id=f"{event.tx.event_key}-{event.tx.hash}",
        token=token,
        amount=uint_amount(msg.amount),
        sender=event.message.sender,
        destination=msg.destination,
        block_height=event.tx.height,
        timestamp=event.tx.time,
        tx_hash=event.tx.hash,
    )


class TransferEventHandler(BaseHandler):
    """Transfers of any asset touching a known manager or proxy address.

    Records the TransferEvent only; balances are kept by TokenTransferHandler.
    """

    label = "Handle Transfer Event"
    message_types = (Transfer,)

    def __init__(self, db_manager, config, verifier: AddressVerifier):
        super().__init__(db_manager, config)
        self.verifier = verifier
        self.transfer_events = db_manager.get_transfer_event_repo()

    def process(self, session: Session, event: CosmosEvent, msg: Transfer) -> None:
        sender_verified = self.verifier.is_known_address(session, event.message.sender)
        destination_verified = self.verifier.is_known_address(session, msg.destination)

        if not sender_verified and not destination_verified:
            return

        self.transfer_events.save(session, build_transfer_event(event, event.message.contract, msg))
        self.log_saved("TransferEvent", event, contract_address=event.message.contract)


class TokenTransferHandler(BaseHandler):
    """cw20 ``transfer``/``send`` on a registered token.

    Updates token statistics, records the TransferEvent, creates both accounts
    lazily and applies the sender and destination balance deltas. Transfers
    on tokens that were never registered are dropped.
    """

    label = "Handle Token Transfer"
    message_types = (Transfer, Send)

    def __init__(self, db_manager, config, token_ledger: TokenLedger,
                 account_registry: AccountRegistry, balance_ledger: BalanceLedger):
        super().__init__(db_manager, config)
        self.token_ledger = token_ledger
        self.account_registry = account_registry
        self.balance_ledger = balance_ledger
        self.transfer_events = db_manager.get_transfer_event_repo()

    def process(self, session: Session, event: CosmosEvent, msg: TransferLike) -> None:
        token = self.token_ledger.record_transfer(session, event.message.contract, msg.amount, event.tx)
        if token is None:
            return

        transfer = self.transfer_events.save(session, build_transfer_event(event, token.address, msg))

        sender = self.account_registry.get_or_create_account(session, transfer.sender)
        destination = self.account_registry.get_or_create_account(session, transfer.destination)

        self.balance_ledger.apply_transfer(session, sender, token.id, token.address,
                                           transfer, TransferSide.SENDER)
        self.balance_ledger.apply_transfer(session, destination, token.id, token.address,
                                           transfer, TransferSide.DESTINATION)

        self.log_saved("TransferEvent", event,
                       token=token.address,
                       amount=str(transfer.amount))


class TokenInstantiateHandler(BaseHandler):
    """Registers a Token for instantiate messages with a recognized code id"""

    label = "Handle Token Instantiate"
    message_types = (None,)

    def __init__(self, db_manager, config, token_ledger: TokenLedger):
        super().__init__(db_manager, config)
        self.token_ledger = token_ledger

    def process(self, session: Session, event: CosmosEvent, msg: None) -> None:
        address = event.contract_address
        if address is None:
            self.log_debug("Instantiate without contract address skipped",
                           tx_hash=event.tx.hash)
            return

        token = self.token_ledger.register_token(session, event, address)
        if token is not None:
            self.log_saved("Token", event, token=token.address)
