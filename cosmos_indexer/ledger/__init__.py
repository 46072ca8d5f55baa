# cosmos_indexer/ledger/__init__.py

from .address_verifier import AddressVerifier
from .token_ledger import TokenLedger
from .account_registry import AccountRegistry
from .balance_ledger import BalanceLedger, TransferSide

__all__ = [
    'AddressVerifier',
    'TokenLedger',
    'AccountRegistry',
    'BalanceLedger',
    'TransferSide',
]
