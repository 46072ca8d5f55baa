# cosmos_indexer/database/repositories/module_execution_repository.py

from ..base_repository import BaseRepository
from ..tables.module_execution import ModuleExecution


class ModuleExecutionRepository(BaseRepository[ModuleExecution]):
    """Repository for module executions"""

    def __init__(self, db_manager):
        super().__init__(db_manager, ModuleExecution)
