# cosmos_indexer/handlers/__init__.py

from .base import BaseHandler, handler_failure
from .accounts import AccountHandler
from .assets import AssetHandler
from .executions import ModuleExecutionHandler
from .modules import ModuleHandler, AccountModuleHandler
from .transfers import TransferEventHandler, TokenTransferHandler, TokenInstantiateHandler, build_transfer_event
from .dispatcher import EventDispatcher

__all__ = [
    'BaseHandler',
    'handler_failure',
    'AccountHandler',
    'AssetHandler',
    'ModuleExecutionHandler',
    'ModuleHandler',
    'AccountModuleHandler',
    'TransferEventHandler',
    'TokenTransferHandler',
    'TokenInstantiateHandler',
    'build_transfer_event',
    'EventDispatcher',
]
