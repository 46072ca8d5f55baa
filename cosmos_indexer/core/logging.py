# cosmos_indexer/core/logging.py
"""
Logging for the indexer: every logger lives under the ``cosmos_indexer``
namespace and handlers attach structured context (tx hash, account, token,
...) as record attributes, which IndexerFormatter renders after the message.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from logging import DEBUG, INFO, WARNING, ERROR


ROOT_LOGGER_NAME = 'cosmos_indexer'

CONTEXT_ATTRS = (
    'tx_hash', 'block_height', 'contract_address', 'message_kind', 'handler_name',
    'account', 'token', 'amount', 'balance', 'module_name', 'error', 'exception_type',
)


class IndexerFormatter(logging.Formatter):
    """``time - logger - LEVEL - message | tx_hash=... account=...``"""

    def __init__(self, include_context: bool = False):
        super().__init__('%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s',
                         datefmt='%Y-%m-%d %H:%M:%S')
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self.include_context:
            return line

        context = ' '.join(f"{attr}={getattr(record, attr)}"
                           for attr in CONTEXT_ATTRS if hasattr(record, attr))
        return f"{line} | {context}" if context else line


class IndexerLogger:
    """Process-wide handler setup for the ``cosmos_indexer`` logger tree"""

    _configured = False

    @classmethod
    def configure(cls,
                  log_dir: Optional[Path] = None,
                  log_level: str = "INFO",
                  console_enabled: bool = True,
                  file_enabled: bool = True,
                  structured_format: bool = True,
                  force: bool = False) -> None:

        if cls._configured and not force:
            return

        level = getattr(logging, log_level.upper())

        if file_enabled and log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)

        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        if console_enabled:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(IndexerFormatter(include_context=structured_format))
            root_logger.addHandler(console_handler)

        if file_enabled and log_dir:
            # everything to indexer.log, failures also to indexer_errors.log
            for filename, handler_level in (('indexer.log', level), ('indexer_errors.log', logging.ERROR)):
                file_handler = logging.FileHandler(log_dir / filename)
                file_handler.setLevel(handler_level)
                file_handler.setFormatter(IndexerFormatter(include_context=True))
                root_logger.addHandler(file_handler)

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._configured:
            cls.configure(file_enabled=False)

        if not name.startswith(ROOT_LOGGER_NAME):
            name = f'{ROOT_LOGGER_NAME}.{name}'

        return logging.getLogger(name)


def get_class_logger(cls_instance) -> logging.Logger:
    module = cls_instance.__class__.__module__
    class_name = cls_instance.__class__.__name__

    prefix = f'{ROOT_LOGGER_NAME}.'
    if module.startswith(prefix):
        module = module[len(prefix):]

    logger_name = f"{module}.{class_name}"
    return IndexerLogger.get_logger(logger_name)


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    if logger.isEnabledFor(level):
        record = logger.makeRecord(
            logger.name, level, "", 0, message, (), None
        )
        for key, value in context.items():
            setattr(record, key, value)
        logger.handle(record)


class LoggingMixin:
    """log_* helpers on a logger named after the class's module and name"""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class"""
        if not hasattr(self, '_logger'):
            self._logger = get_class_logger(self)
        return self._logger

    def log_debug(self, message: str, **context) -> None:
        log_with_context(self.logger, DEBUG, message, **context)

    def log_info(self, message: str, **context) -> None:
        log_with_context(self.logger, INFO, message, **context)

    def log_warning(self, message: str, **context) -> None:
        log_with_context(self.logger, WARNING, message, **context)

    def log_error(self, message: str, **context) -> None:
        log_with_context(self.logger, ERROR, message, **context)

    def log_transaction_context(self, tx_hash: str, **additional_context) -> Dict[str, Any]:
        context = {'tx_hash': tx_hash}
        context.update(additional_context)
        return context
