# cosmos_indexer/types/configs/config.py

from typing import Optional

from msgspec import Struct

from ..new import CosmosAddress


class DatabaseConfig(Struct):
    url: str
    pool_size: int = 5
    max_overflow: int = 10

class LoggingConfig(Struct):
    level: str = "INFO"
    log_dir: Optional[str] = None
    console_enabled: bool = True
    file_enabled: bool = False
    structured_format: bool = True

class ContractsConfig(Struct):
    # unset address means "accept any contract" for that handler family
    account_factory: Optional[CosmosAddress] = None
    version_control: Optional[CosmosAddress] = None
    ans_host: Optional[CosmosAddress] = None

