# cosmos_indexer/types/errors.py

"""
Exceptions raised by the indexer.

Filtered-out messages and missing references are not errors: handlers return
silently for those. Everything else that goes wrong while handling one event
surfaces as a HandlerError naming the handler and the transaction.
"""

from typing import Optional

from .new import TxHash


class IndexerError(Exception):
    """Base class for indexer errors"""


class ConfigError(IndexerError, ValueError):
    """Invalid or missing configuration"""


class HandlerError(IndexerError):
    """An event handler failed; wraps the original exception message.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, label: str, tx_hash: Optional[TxHash], message: str):
        self.label = label
        self.tx_hash = tx_hash
        self.reason = message
        super().__init__(f"{label} {tx_hash} Failed: {message}")
