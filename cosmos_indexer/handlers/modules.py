# cosmos_indexer/handlers/modules.py

from typing import Optional

from sqlalchemy.orm import Session

from ..database.tables import Module, ModuleSnapshot, AccountModule
from ..types import (
    AddModules,
    CosmosAddress,
    CosmosEvent,
    InstallModule,
    ModuleInfo,
    ModuleReference,
)
from .base import BaseHandler, handler_failure


class ModuleHandler(BaseHandler):
    """Module registrations on the version control contract (``add_modules``).

    Every module is upserted first, then one snapshot per module is appended.
    """

    label = "Abstract Module"
    message_types = (AddModules,)
    contract_role = "version_control"

    def __init__(self, db_manager, config):
        super().__init__(db_manager, config)
        self.modules = db_manager.get_module_repo()
        self.module_snapshots = db_manager.get_module_snapshot_repo()

    def process(self, session: Session, event: CosmosEvent, msg: AddModules) -> None:
        with handler_failure("Verify Module", event):
            for module, reference in msg.modules:
                self.verify_module(session, event, module, reference)

        with handler_failure("Create Module Snapshot", event):
            for module, reference in msg.modules:
                self.create_module_snapshot(session, event, module, reference)

    def verify_module(self, session: Session, event: CosmosEvent,
                      module: ModuleInfo, reference: ModuleReference) -> Module:
        """Create the module, or bump version and provenance if it already exists"""
        module_id = self.modules.module_id(event.tx.event_key, module.namespace, module.name)
        existing = self.modules.get_by_id(session, module_id)

        if existing is None:
            return self.create_module(session, event, module, reference)

        existing.version = str(module.version)
        existing.type = reference.kind
        existing.address = reference.address
        existing.vc_address = event.message.contract
        existing.block_height = event.tx.height
        existing.timestamp = event.tx.time
        existing.tx_hash = event.tx.hash
        saved = self.modules.save(session, existing)

        self.log_info(f"Updated module {event.tx.hash} successfully saved to db",
                      tx_hash=event.tx.hash,
                      module_name=module.id)
        return saved

    def create_module(self, session: Session, event: CosmosEvent,
                      module: ModuleInfo, reference: ModuleReference) -> Module:
        record = Module(
            id=self.modules.module_id(event.tx.event_key, module.namespace, module.name),
            namespace=module.namespace,
            name=module.name,
            version=str(module.version),
            type=reference.kind,
            address=reference.address,
            sender=event.message.sender,
            vc_address=event.message.contract,
            block_height=event.tx.height,
            timestamp=event.tx.time,
            tx_hash=event.tx.hash,
        )
        saved = self.modules.save(session, record)
        self.log_saved("Module", event, module_name=module.id)
        return saved

    def create_module_snapshot(self, session: Session, event: CosmosEvent,
                               module: ModuleInfo, reference: ModuleReference) -> ModuleSnapshot:
        module_id = self.modules.module_id(event.tx.event_key, module.namespace, module.name)
        snapshot = ModuleSnapshot(
            id=f"{module_id}-{event.tx.time.isoformat()}",
            namespace=module.namespace,
            name=module.name,
            version=str(module.version),
            type=reference.kind,
            address=reference.address,
            sender=event.message.sender,
            vc_address=event.message.contract,
            block_height=event.tx.height,
            timestamp=event.tx.time,
            tx_hash=event.tx.hash,
        )
        saved = self.module_snapshots.save(session, snapshot)
        self.log_saved("Module snapshot", event, module_name=module.id)
        return saved


class AccountModuleHandler(BaseHandler):
    """Module installs on a governance account's manager (``install_module``).

    Managers that belong to no tracked account produce nothing.
    """

    label = "Handle Installed Account Module"
    message_types = (InstallModule,)

    def __init__(self, db_manager, config):
        super().__init__(db_manager, config)
        self.accounts = db_manager.get_account_repo()
        self.account_modules = db_manager.get_account_module_repo()

    def process(self, session: Session, event: CosmosEvent, msg: InstallModule) -> None:
        contract = event.message.contract
        account = self.accounts.get_by_manager(session, contract)
        if account is None:
            self.log_debug("No account for manager, install skipped",
                           tx_hash=event.tx.hash,
                           contract_address=contract)
            return

        module_address = self.find_module_address(event)
        module = msg.module

        account_module = AccountModule(
            id=f"{event.tx.event_key}-{module_address}",
            address=module_address,
            namespace=module.namespace,
            name=module.name,
            version=str(module.version),
            manager=contract,
            account=account.address,
            vc_address=self.config.contracts.version_control,
            sender=event.message.sender,
            block_height=event.tx.height,
            timestamp=event.tx.time,
            tx_hash=event.tx.hash,
        )
        self.account_modules.save(session, account_module)
        self.log_saved("AccountModule", event, module_name=module.id)

    def find_module_address(self, event: CosmosEvent) -> Optional[CosmosAddress]:
        """First ``module`` attribute of a wasm-abstract event holding a chain address"""
        for log_event in event.events:
            if log_event.type != "wasm-abstract":
                continue
            for value in log_event.values("module"):
                if value.startswith(self.config.address_prefix):
                    return CosmosAddress(value)
        return None
