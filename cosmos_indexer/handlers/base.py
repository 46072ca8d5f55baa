# cosmos_indexer/handlers/base.py

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ClassVar, Generator, Optional, Tuple, Type

from sqlalchemy.orm import Session

from ..core.config import IndexerConfig
from ..core.logging import IndexerLogger, LoggingMixin, log_with_context, ERROR
from ..types import ContractMsg, CosmosAddress, CosmosEvent, HandlerError


_failure_logger = IndexerLogger.get_logger('handlers.failures')


@contextmanager
def handler_failure(label: str, event: CosmosEvent) -> Generator[None, None, None]:
    """Log any exception with the tx hash and re-raise it as a HandlerError"""
    try:
        yield
    except Exception as e:
        tx_hash = event.tx.hash
        message = f"{label} {tx_hash} Failed: {e}"
        log_with_context(_failure_logger, ERROR, message,
                         tx_hash=tx_hash,
                         handler_name=label,
                         exception_type=type(e).__name__)
        raise HandlerError(label, tx_hash, str(e)) from e


class BaseHandler(ABC, LoggingMixin):
    """One recorder per contract-message kind.

    ``message_types`` lists the decoded variants the handler accepts; ``None``
    in that tuple means the handler takes instantiate messages, which carry no
    execute variant. ``contract_role`` names the ContractsConfig address the
    message contract must match, when one is configured.
    """

    label: ClassVar[str] = ""
    message_types: ClassVar[Tuple[Optional[Type[ContractMsg]], ...]] = ()
    contract_role: ClassVar[Optional[str]] = None

    def __init__(self, db_manager, config: IndexerConfig):
        self.db_manager = db_manager
        self.config = config
        self.name = self.__class__.__name__

    def accepts(self, msg: Optional[ContractMsg]) -> bool:
        if msg is None:
            return None in self.message_types
        return isinstance(msg, tuple(t for t in self.message_types if t is not None))

    def is_allowed_contract(self, contract: Optional[CosmosAddress]) -> bool:
        if self.contract_role is None:
            return True
        return self.config.accepts_contract(self.contract_role, contract)

    def handle(self, session: Session, event: CosmosEvent, msg: Optional[ContractMsg]) -> None:
        with handler_failure(self.label, event):
            if not self.is_allowed_contract(event.message.contract):
                self.log_debug("Message from unapproved contract skipped",
                               tx_hash=event.tx.hash,
                               contract_address=event.message.contract,
                               handler_name=self.name)
                return
            self.process(session, event, msg)

    @abstractmethod
    def process(self, session: Session, event: CosmosEvent, msg: Optional[ContractMsg]) -> None:
        ...

    def log_saved(self, entity: str, event: CosmosEvent, **context) -> None:
        self.log_info(f"{entity} {event.tx.hash} successfully saved to db",
                      **self.log_transaction_context(event.tx.hash,
                                                     block_height=event.tx.height,
                                                     handler_name=self.name,
                                                     **context))
