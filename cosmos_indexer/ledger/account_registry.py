# cosmos_indexer/ledger/account_registry.py

from sqlalchemy.orm import Session

from ..core.logging import LoggingMixin
from ..database.tables import Account
from ..types import CosmosAddress


class AccountRegistry(LoggingMixin):

    def __init__(self, db_manager):
        self.accounts = db_manager.get_account_repo()

    def get_or_create_account(self, session: Session, address: CosmosAddress) -> Account:
        """Return the account for ``address``, creating a bare one if none exists.

        The lookup always runs first: an existing row (possibly a governance
        account with manager/proxy data) is returned untouched.
        """
        account = self.accounts.get_by_address(session, address)
        if account is not None:
            return account

        account = self.accounts.create(session, id=address, address=address)
        self.log_debug("Account created", account=address)
        return account
