# cosmos_indexer/database/tables/module_execution.py

from sqlalchemy import Column, String

from ..base import DBEventModel
from ..types import CosmosAddressType


class ModuleExecution(DBEventModel):
    __tablename__ = 'module_executions'

    address = Column(CosmosAddressType(), nullable=False, index=True)  # manager contract
    module_id = Column(String(255), nullable=False, index=True)
