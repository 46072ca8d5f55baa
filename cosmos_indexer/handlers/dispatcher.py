# cosmos_indexer/handlers/dispatcher.py

from typing import Dict, List, Optional, Tuple

import msgspec

from ..core.config import IndexerConfig
from ..core.logging import LoggingMixin
from ..ledger import AddressVerifier, TokenLedger, AccountRegistry, BalanceLedger
from ..types import (
    AddModules,
    ContractMsg,
    CosmosEvent,
    CreateAccount,
    ExecOnModule,
    HandlerError,
    InstallModule,
    Send,
    Transfer,
    UpdateAssetAddresses,
    decode_execute_msg,
)
from .accounts import AccountHandler
from .assets import AssetHandler
from .base import BaseHandler
from .executions import ModuleExecutionHandler
from .modules import ModuleHandler, AccountModuleHandler
from .transfers import TransferEventHandler, TokenTransferHandler, TokenInstantiateHandler


INSTANTIATE = "instantiate"


class EventDispatcher(LoggingMixin):
    """
    Entry point for decoded events.

    ``dispatch`` decodes the contract message once, picks the handlers
    registered for its kind and runs them in order inside one database
    transaction; a failure rolls the whole event back. Events must be
    delivered one at a time.

    The ``handle_*`` methods run a single handler for hosts that route
    messages themselves.
    """

    def __init__(self, db_manager, config: IndexerConfig):
        self.db_manager = db_manager
        self.config = config

        self.verifier = AddressVerifier(db_manager)
        self.token_ledger = TokenLedger(db_manager, config)
        self.account_registry = AccountRegistry(db_manager)
        self.balance_ledger = BalanceLedger(db_manager)

        self.handlers: Dict[str, BaseHandler] = {
            'account': AccountHandler(db_manager, config),
            'module': ModuleHandler(db_manager, config),
            'asset': AssetHandler(db_manager, config),
            'account_module': AccountModuleHandler(db_manager, config),
            'transfer_event': TransferEventHandler(db_manager, config, self.verifier),
            'module_execution': ModuleExecutionHandler(db_manager, config, self.verifier),
            'token_instantiate': TokenInstantiateHandler(db_manager, config, self.token_ledger),
            'token_transfer': TokenTransferHandler(
                db_manager, config, self.token_ledger, self.account_registry, self.balance_ledger
            ),
        }

        self.handler_map: Dict[str, List[BaseHandler]] = {
            INSTANTIATE: [self.handlers['token_instantiate']],
            Transfer.kind: [self.handlers['token_transfer'], self.handlers['transfer_event']],
            Send.kind: [self.handlers['token_transfer']],
            CreateAccount.kind: [self.handlers['account']],
            AddModules.kind: [self.handlers['module']],
            UpdateAssetAddresses.kind: [self.handlers['asset']],
            InstallModule.kind: [self.handlers['account_module']],
            ExecOnModule.kind: [self.handlers['module_execution']],
        }

        self.log_info("EventDispatcher initialized",
                      handler_count=len(self.handlers),
                      message_kinds=sorted(self.handler_map))

    def decode(self, event: CosmosEvent) -> Tuple[Optional[str], Optional[ContractMsg]]:
        """Return (kind, decoded message); kind is None for unknown messages"""
        if event.message.kind == INSTANTIATE:
            return INSTANTIATE, None

        try:
            msg = decode_execute_msg(event.message.msg)
        except (msgspec.ValidationError, ValueError) as e:
            self.log_error(f"Decode Message {event.tx.hash} Failed: {e}",
                           tx_hash=event.tx.hash,
                           contract_address=event.message.contract)
            raise HandlerError("Decode Message", event.tx.hash, str(e)) from e

        return (msg.kind, msg) if msg is not None else (None, None)

    def dispatch(self, event: CosmosEvent) -> int:
        """Run every handler registered for the event's message; returns how many ran"""
        kind, msg = self.decode(event)
        handlers = self.handler_map.get(kind, []) if kind else []

        if not handlers:
            self.log_debug("No handler for message",
                           tx_hash=event.tx.hash,
                           message_kind=kind or next(iter(event.message.msg), None))
            return 0

        with self.db_manager.get_transaction() as session:
            for handler in handlers:
                handler.handle(session, event, msg)

        self.log_debug("Event dispatched",
                       tx_hash=event.tx.hash,
                       block_height=event.tx.height,
                       message_kind=kind,
                       handler_count=len(handlers))
        return len(handlers)

    def run_handler(self, name: str, event: CosmosEvent) -> bool:
        """Run one named handler; False when the message is not of its kind"""
        handler = self.handlers[name]
        _, msg = self.decode(event)

        if event.message.kind == INSTANTIATE:
            accepted = handler.accepts(None)
        else:
            accepted = msg is not None and handler.accepts(msg)

        if not accepted:
            return False

        with self.db_manager.get_transaction() as session:
            handler.handle(session, event, msg)
        return True

    # === Named entry points ===

    def handle_account_events(self, event: CosmosEvent) -> bool:
        return self.run_handler('account', event)

    def handle_abstract_module_events(self, event: CosmosEvent) -> bool:
        return self.run_handler('module', event)

    def handle_asset_ans_events(self, event: CosmosEvent) -> bool:
        return self.run_handler('asset', event)

    def handle_module_events(self, event: CosmosEvent) -> bool:
        return self.run_handler('account_module', event)

    def handle_transfer_event(self, event: CosmosEvent) -> bool:
        return self.run_handler('transfer_event', event)

    def handle_exec_on_module_event(self, event: CosmosEvent) -> bool:
        return self.run_handler('module_execution', event)

    def handle_token_instantiate(self, event: CosmosEvent) -> bool:
        return self.run_handler('token_instantiate', event)

    def handle_token_transfer(self, event: CosmosEvent) -> bool:
        return self.run_handler('token_transfer', event)
