# cosmos_indexer/ledger/address_verifier.py

from typing import Optional

from sqlalchemy.orm import Session

from ..core.logging import LoggingMixin
from ..types import CosmosAddress


class AddressVerifier(LoggingMixin):
    """Allow-list check: is this address a manager or proxy of a tracked account?

    An account's own ``address`` column does not count.
    """

    def __init__(self, db_manager):
        self.accounts = db_manager.get_account_repo()

    def is_known_address(self, session: Session, address: Optional[CosmosAddress]) -> bool:
        if not address:
            return False

        verified = (self.accounts.get_by_manager(session, address)
                    or self.accounts.get_by_proxy(session, address))

        self.log_debug("Address verification",
                       account=address,
                       verified=verified is not None)
        return verified is not None
