# cosmos_indexer/database/tables/__init__.py

from .token import Token
from .transfer_event import TransferEvent
from .account import Account
from .account_balance import AccountBalance, AccountBalanceSnapshot
from .module import Module, ModuleSnapshot, AccountModule
from .asset import Asset
from .module_execution import ModuleExecution

__all__ = [
    'Token',
    'TransferEvent',
    'Account',
    'AccountBalance',
    'AccountBalanceSnapshot',
    'Module',
    'ModuleSnapshot',
    'AccountModule',
    'Asset',
    'ModuleExecution',
]
