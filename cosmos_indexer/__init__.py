# cosmos_indexer/__init__.py

from typing import Mapping, Optional

from .core.config import IndexerConfig
from .core.logging import IndexerLogger
from .database.connection import DatabaseManager
from .handlers import EventDispatcher
from .types import CosmosEvent, HandlerError, ConfigError, decode_event


def create_indexer(config_file: Optional[str] = None,
                   config: Optional[IndexerConfig] = None,
                   env_vars: Optional[Mapping[str, str]] = None,
                   create_schema: bool = False) -> EventDispatcher:
    """Build a ready-to-use dispatcher from a config file or an IndexerConfig"""
    if config is None:
        if config_file is None:
            raise ConfigError("Either config_file or config is required")
        config = IndexerConfig.from_file(config_file, env_vars)

    config.configure_logging()
    logger = IndexerLogger.get_logger('core.init')
    logger.info(f"Creating indexer '{config.name}'")

    db_manager = DatabaseManager(config.database)
    db_manager.initialize()
    if create_schema:
        db_manager.create_schema()

    return EventDispatcher(db_manager, config)


__all__ = [
    'create_indexer',
    'IndexerConfig',
    'DatabaseManager',
    'EventDispatcher',
    'CosmosEvent',
    'HandlerError',
    'ConfigError',
    'decode_event',
]
