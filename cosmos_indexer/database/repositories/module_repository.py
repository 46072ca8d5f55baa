# cosmos_indexer/database/repositories/module_repository.py

from typing import List

from sqlalchemy.orm import Session

from ...types import CosmosAddress
from ..base_repository import BaseRepository
from ..tables.module import Module, ModuleSnapshot, AccountModule


class ModuleRepository(BaseRepository[Module]):

    def __init__(self, db_manager):
        super().__init__(db_manager, Module)

    @staticmethod
    def module_id(event_key: str, namespace: str, name: str) -> str:
        return f"{event_key}-{namespace}:{name}"


class ModuleSnapshotRepository(BaseRepository[ModuleSnapshot]):

    def __init__(self, db_manager):
        super().__init__(db_manager, ModuleSnapshot)

    def get_by_name(self, session: Session, namespace: str, name: str) -> List[ModuleSnapshot]:
        try:
            return session.query(ModuleSnapshot).filter(
                ModuleSnapshot.namespace == namespace,
                ModuleSnapshot.name == name,
            ).order_by(ModuleSnapshot.timestamp).all()
        except Exception as e:
            self.logger.error(f"Error getting ModuleSnapshots for {namespace}:{name}: {e}")
            raise


class AccountModuleRepository(BaseRepository[AccountModule]):

    def __init__(self, db_manager):
        super().__init__(db_manager, AccountModule)

    def get_by_account(self, session: Session, account: CosmosAddress) -> List[AccountModule]:
        try:
            return session.query(AccountModule).filter(
                AccountModule.account == account
            ).order_by(AccountModule.timestamp).all()
        except Exception as e:
            self.logger.error(f"Error getting AccountModules for {account}: {e}")
            raise
