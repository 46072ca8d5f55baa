# cosmos_indexer/database/tables/module.py

from sqlalchemy import Column, String

from ..base import DBBaseModel, DBEventModel, BlockchainMixin
from ..types import CosmosAddressType


class Module(DBBaseModel, BlockchainMixin):
    """Module registered on the version control contract; version bumps update in place"""
    __tablename__ = 'modules'

    namespace = Column(String(128), nullable=False, index=True)
    name = Column(String(128), nullable=False, index=True)
    version = Column(String(64), nullable=False)
    type = Column(String(32), nullable=False)  # module reference kind, e.g. "wasm"
    address = Column(String(128), nullable=True)  # address or code id, per reference kind
    sender = Column(CosmosAddressType(), nullable=False)
    vc_address = Column(CosmosAddressType(), nullable=False)

    def __repr__(self) -> str:
        return f"<Module({self.namespace}:{self.name}@{self.version})>"


class ModuleSnapshot(DBEventModel):
    __tablename__ = 'module_snapshots'

    namespace = Column(String(128), nullable=False, index=True)
    name = Column(String(128), nullable=False, index=True)
    version = Column(String(64), nullable=False)
    type = Column(String(32), nullable=False)
    address = Column(String(128), nullable=True)
    sender = Column(CosmosAddressType(), nullable=False)
    vc_address = Column(CosmosAddressType(), nullable=False)


class AccountModule(DBEventModel):
    """Module installed on a governance account"""
    __tablename__ = 'account_modules'

    address = Column(CosmosAddressType(), nullable=True, index=True)
    namespace = Column(String(128), nullable=False)
    name = Column(String(128), nullable=False)
    version = Column(String(64), nullable=False)
    manager = Column(CosmosAddressType(), nullable=False, index=True)
    account = Column(CosmosAddressType(), nullable=False, index=True)
    vc_address = Column(CosmosAddressType(), nullable=True)
    sender = Column(CosmosAddressType(), nullable=False)
