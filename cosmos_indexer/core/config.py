# cosmos_indexer/core/config.py

from pathlib import Path
from typing import Dict, Optional, List, Any, Mapping
import json
import os
import logging

import msgspec
import yaml
from msgspec import Struct, field

from ..types import (
    CosmosAddress,
    DatabaseConfig,
    LoggingConfig,
    ContractsConfig,
    ConfigError,
)
from .logging import IndexerLogger, log_with_context


ENV_DB_URL = "COSMOS_INDEXER_DB_URL"
ENV_LOG_LEVEL = "COSMOS_INDEXER_LOG_LEVEL"
ENV_LOG_DIR = "COSMOS_INDEXER_LOG_DIR"


class IndexerConfig(Struct):
    name: str
    database: DatabaseConfig
    address_prefix: str = "juno"
    code_ids: List[int] = []  # recognized token contract code ids
    contracts: ContractsConfig = field(default_factory=ContractsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_file: str, env_vars: Optional[Mapping[str, str]] = None) -> 'IndexerConfig':
        config_path = Path(config_file)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_file}")

        try:
            with open(config_path, 'r') as f:
                if config_path.suffix.lower() in ['.yaml', '.yml']:
                    config_data = yaml.safe_load(f)
                elif config_path.suffix.lower() == '.json':
                    config_data = json.load(f)
                else:
                    raise ConfigError(f"Unsupported config file type: {config_path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to parse config file {config_file}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping")

        return cls.from_dict(config_data, env_vars)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any],
                  env_vars: Optional[Mapping[str, str]] = None) -> 'IndexerConfig':
        logger = IndexerLogger.get_logger('core.config')

        if env_vars is None:
            from dotenv import load_dotenv
            load_dotenv()
            env_vars = os.environ

        data = cls._apply_env_overrides(dict(config_data), env_vars)

        try:
            config = msgspec.convert(data, type=cls)
        except msgspec.ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        config.validate()

        log_with_context(logger, logging.INFO, "Configuration loaded",
                         config_name=config.name,
                         code_id_count=len(config.code_ids))
        return config

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any], env: Mapping[str, str]) -> Dict[str, Any]:
        if env.get(ENV_DB_URL):
            database = dict(data.get('database') or {})
            database['url'] = env[ENV_DB_URL]
            data['database'] = database

        log_overrides = {}
        if env.get(ENV_LOG_LEVEL):
            log_overrides['level'] = env[ENV_LOG_LEVEL]
        if env.get(ENV_LOG_DIR):
            log_overrides['log_dir'] = env[ENV_LOG_DIR]
            log_overrides['file_enabled'] = True
        if log_overrides:
            data['logging'] = {**(data.get('logging') or {}), **log_overrides}

        return data

    def validate(self) -> None:
        if not self.database.url:
            raise ConfigError("database.url is required")
        if self.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigError(f"Unknown log level: {self.logging.level}")
        if not self.address_prefix:
            raise ConfigError("address_prefix must not be empty")

    def is_recognized_code_id(self, code_id: Optional[int]) -> bool:
        return code_id is not None and code_id in self.code_ids

    def accepts_contract(self, role: str, contract: Optional[CosmosAddress]) -> bool:
        """True when no address is configured for ``role`` or ``contract`` matches it"""
        expected = getattr(self.contracts, role)
        return expected is None or expected == contract

    def get_log_dir(self) -> Optional[Path]:
        return Path(self.logging.log_dir) if self.logging.log_dir else None

    def configure_logging(self, log_level: Optional[str] = None) -> None:
        IndexerLogger.configure(
            log_dir=self.get_log_dir(),
            log_level=log_level or self.logging.level,
            console_enabled=self.logging.console_enabled,
            file_enabled=self.logging.file_enabled,
            structured_format=self.logging.structured_format,
            force=True,
        )
