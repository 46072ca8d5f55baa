# cosmos_indexer/types/__init__.py

from .new import (
    CosmosAddress,
    TxHash,
    BlockId,
    DenomStr,
    AmountStr,
)

from .configs.config import (
    DatabaseConfig,
    LoggingConfig,
    ContractsConfig,
)

from .cosmos import (
    MessageKind,
    Coin,
    EventAttribute,
    LogEvent,
    TxContext,
    ContractMessage,
    CosmosEvent,
    BlockTime,
    decode_event,
)

from .messages import (
    ModuleReference,
    ModuleVersion,
    Governance,
    AssetInfo,
    ModuleInfo,
    ContractMsg,
    Transfer,
    Send,
    TransferLike,
    AddModules,
    UpdateAssetAddresses,
    CreateAccount,
    InstallModule,
    ExecOnModule,
    Cw20Coin,
    MinterResponse,
    Cw20Instantiate,
    EXECUTE_MESSAGES,
    decode_execute_msg,
    split_asset_entry,
)

from .errors import (
    IndexerError,
    ConfigError,
    HandlerError,
)
