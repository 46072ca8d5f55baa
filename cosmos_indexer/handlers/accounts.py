# cosmos_indexer/handlers/accounts.py

from sqlalchemy.orm import Session

from ..database.tables import Account
from ..types import CosmosEvent, CreateAccount
from ..utils.amounts import amount_to_decimal
from .base import BaseHandler


class AccountHandler(BaseHandler):
    """Governance accounts created through the account factory (``create_account``).

    Role addresses come from the ``wasm-abstract`` sub-event; when that event
    or one of its attributes is missing the column stays null. Funds absent
    means null denom and amount, not zero.
    """

    label = "Execute Account Event"
    message_types = (CreateAccount,)
    contract_role = "account_factory"

    def __init__(self, db_manager, config):
        super().__init__(db_manager, config)
        self.accounts = db_manager.get_account_repo()

    def process(self, session: Session, event: CosmosEvent, msg: CreateAccount) -> None:
        abstract = event.find_event("wasm-abstract")

        def attribute(key):
            return abstract.get(key) if abstract else None

        coin = event.first_coin

        account = Account(
            id=event.tx.event_key,
            address=event.message.contract,
            abstract_id=attribute("account_id"),
            creator=event.message.sender,
            name=msg.name,
            owner=msg.governance.owner,
            manager=attribute("manager_address"),
            proxy=attribute("proxy_address"),
            admin=attribute("admin"),
            description=msg.description,
            governance_type=msg.governance.kind,
            funds_denom=coin.denom if coin else None,
            funds_amount=amount_to_decimal(coin.amount) if coin else None,
            block_height=event.tx.height,
            timestamp=event.tx.time,
            tx_hash=event.tx.hash,
        )
        self.accounts.save(session, account)
        self.log_saved("Account", event, account=account.id)
