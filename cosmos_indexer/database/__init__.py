# cosmos_indexer/database/__init__.py

from .base import ModelBase
from .connection import DatabaseManager

__all__ = ['ModelBase', 'DatabaseManager']
