# cosmos_indexer/database/base.py

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import Column, DateTime, Integer, String, text
from sqlalchemy.orm import declarative_base, declarative_mixin

from .types import TxHashType


ModelBase = declarative_base()

@declarative_mixin
class TimestampMixin:
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text('CURRENT_TIMESTAMP')
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text('CURRENT_TIMESTAMP'),
        onupdate=lambda: datetime.now(timezone.utc)
    )


@declarative_mixin
class BlockchainMixin:
    """Block/transaction provenance of the last write"""
    block_height = Column(Integer, nullable=True, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=True, index=True)
    tx_hash = Column(TxHashType(), nullable=True, index=True)


class DBBaseModel(ModelBase, TimestampMixin):
    __abstract__ = True

    id = Column(String(255), primary_key=True)

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)

            if isinstance(value, datetime):
                result[column.name] = value.isoformat()
            elif isinstance(value, Decimal):
                result[column.name] = format(value, 'f')
            else:
                result[column.name] = value

        return result

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class DBEventModel(DBBaseModel, BlockchainMixin):
    """Append-only fact recorded from one message"""
    __abstract__ = True
