# cosmos_indexer/database/repositories/__init__.py

from .account_repository import AccountRepository
from .token_repository import TokenRepository
from .balance_repository import AccountBalanceRepository, AccountBalanceSnapshotRepository
from .transfer_event_repository import TransferEventRepository
from .module_repository import ModuleRepository, ModuleSnapshotRepository, AccountModuleRepository
from .asset_repository import AssetRepository
from .module_execution_repository import ModuleExecutionRepository
