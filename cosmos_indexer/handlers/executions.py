# cosmos_indexer/handlers/executions.py

from sqlalchemy.orm import Session

from ..database.tables import ModuleExecution
from ..ledger import AddressVerifier
from ..types import CosmosEvent, ExecOnModule
from .base import BaseHandler


class ModuleExecutionHandler(BaseHandler):
    """``exec_on_module`` calls made through a known manager or proxy"""

    label = "Handle Module Execution Event"
    message_types = (ExecOnModule,)

    def __init__(self, db_manager, config, verifier: AddressVerifier):
        super().__init__(db_manager, config)
        self.verifier = verifier
        self.executions = db_manager.get_module_execution_repo()

    def process(self, session: Session, event: CosmosEvent, msg: ExecOnModule) -> None:
        contract = event.message.contract
        if not self.verifier.is_known_address(session, contract):
            return

        execution = ModuleExecution(
            id=f"{event.tx.event_key}-{event.tx.hash}",
            address=contract,
            module_id=msg.module_id,
            block_height=event.tx.height,
            timestamp=event.tx.time,
            tx_hash=event.tx.hash,
        )
        self.executions.save(session, execution)
        self.log_saved("ModuleExecutionEvent", event, module_name=msg.module_id)
