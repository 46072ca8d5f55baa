# cosmos_indexer/database/types.py

from decimal import Decimal
from typing import Optional, Union

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from ..types.new import CosmosAddress, TxHash


class CosmosAddressType(TypeDecorator):
    impl = String(128)
    cache_ok = True

    def process_bind_param(self, value: Optional[CosmosAddress], dialect) -> Optional[str]:
        return str(value).lower() if value else None

    def process_result_value(self, value: Optional[str], dialect) -> Optional[CosmosAddress]:
        return CosmosAddress(value) if value else None


class TxHashType(TypeDecorator):
    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value: Optional[TxHash], dialect) -> Optional[str]:
        return str(value).upper() if value else None

    def process_result_value(self, value: Optional[str], dialect) -> Optional[TxHash]:
        return TxHash(value) if value else None


class DecimalString(TypeDecorator):
    """Arbitrary-precision decimal stored as text.

    Backends without a native decimal (SQLite) would round through float.
    """
    impl = String(96)
    cache_ok = True

    def process_bind_param(self, value: Optional[Union[Decimal, int, str]], dialect) -> Optional[str]:
        if value is None:
            return None
        return format(Decimal(value), 'f')

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        return Decimal(value) if value is not None else None
