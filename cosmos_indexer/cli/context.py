# cosmos_indexer/cli/context.py

"""
CLI context: lazily loads the configuration and owns the database manager
and dispatcher shared by every command in one invocation.
"""

import logging
from typing import Optional

import click

from ..core.config import IndexerConfig
from ..types import ConfigError
from ..core.logging import IndexerLogger, log_with_context
from ..database.connection import DatabaseManager


class CLIContext:

    def __init__(self, config_path: str, log_level: Optional[str] = None):
        self.config_path = config_path
        self.log_level = log_level
        self.logger = IndexerLogger.get_logger('cli.context')
        self._config: Optional[IndexerConfig] = None
        self._db_manager: Optional[DatabaseManager] = None
        self._dispatcher = None

    @property
    def config(self) -> IndexerConfig:
        if self._config is None:
            try:
                self._config = IndexerConfig.from_file(self.config_path)
            except ConfigError as e:
                raise click.ClickException(str(e)) from e
            self._config.configure_logging(self.log_level)
        return self._config

    @property
    def db_manager(self) -> DatabaseManager:
        if self._db_manager is None:
            self._db_manager = DatabaseManager(self.config.database)
            self._db_manager.initialize()
            log_with_context(self.logger, logging.INFO, "CLI database manager created",
                             config_name=self.config.name)
        return self._db_manager

    @property
    def dispatcher(self):
        if self._dispatcher is None:
            from ..handlers import EventDispatcher
            self._dispatcher = EventDispatcher(self.db_manager, self.config)
        return self._dispatcher

    def shutdown(self) -> None:
        if self._db_manager is not None:
            self._db_manager.shutdown()
            self._db_manager = None
        self._dispatcher = None
